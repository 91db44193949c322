"""Error hierarchy — status codes, codes and the response envelope."""

from scoreboard.core.errors import (
    ErrorCategory, IntegrityViolationError, ResourceNotFoundError,
    ScoreboardError, StoreError, StoreUnavailableError,
)


def test_not_found_names_entity_and_id():
    err = ResourceNotFoundError("Player", 3)
    assert err.http_status == 404
    assert err.message == "Player with ID 3 not found"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.entity == "Player"
    assert err.context.entity_id == 3


def test_store_errors_are_all_500_with_distinct_codes():
    errors = [
        StoreError("boom", "select"),
        IntegrityViolationError("FOREIGN KEY constraint failed", "insert"),
        StoreUnavailableError("connection refused", "select"),
    ]
    assert {e.http_status for e in errors} == {500}
    assert [e.code for e in errors] == [
        "STORE_ERROR", "INTEGRITY_ERROR", "STORE_UNAVAILABLE",
    ]
    assert all(isinstance(e, ScoreboardError) for e in errors)


def test_store_error_keeps_message_verbatim():
    err = IntegrityViolationError(
        'insert or update on table "scores" violates foreign key constraint',
        "insert",
    )
    assert err.to_response()["error"]["message"] == (
        'insert or update on table "scores" violates foreign key constraint'
    )


def test_to_response_envelope():
    body = ResourceNotFoundError("Game", 9).to_response()["error"]
    assert set(body) == {
        "code", "message", "category", "severity", "timestamp", "context",
    }
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "warning"
    assert body["context"] == {"entity": "Game", "entity_id": 9, "operation": None}
