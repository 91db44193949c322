"""Logging setup — one JSON object per line for the scoreboard service.

Invariants:
    - Each line carries timestamp, level, logger and message
    - timestamp is when the record was created (UTC), not when it was written
    - Record/statement extras (entity, entity_id, error_code, path, operation)
      appear only when the caller passed them
    - LOG_FORMAT=text switches to a plain single-line format for local runs

Design Decisions:
    - Configured once from the app lifespan with LOG_LEVEL / LOG_FORMAT
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("entity", "entity_id", "error_code", "path", "operation")

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record and its scoreboard extras as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: getattr(record, key)
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    handler = logging.StreamHandler()
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    handler.setFormatter(formatter)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
