"""JSON log formatter — extra fields surfaced only when present."""

import json
import logging

from scoreboard.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "scoreboard.test", logging.INFO, __file__, 1, "Player created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "scoreboard.test"
    assert log["message"] == "Player created"
    assert "entity" not in log


def test_includes_entity_extras():
    log = json.loads(JSONFormatter().format(
        _record(entity="Player", entity_id=3, error_code="RESOURCE_NOT_FOUND"),
    ))
    assert log["entity"] == "Player"
    assert log["entity_id"] == 3
    assert log["error_code"] == "RESOURCE_NOT_FOUND"


def test_timestamp_is_record_creation_time():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter().format(record))
    assert log["timestamp"] == "1970-01-01T00:00:00+00:00"
