"""Shape Validation — pure checks and error formatting for inbound payloads.

Invariants:
    - No function here touches the store or performs IO
    - Path identifiers and query limits are the only string → int transforms
    - Dates are ISO text only; numbers are never read as timestamps
    - Every failure is reported per field as {field, location, message, type}

Design Decisions:
    - Shapes themselves live in schemas/ as Pydantic models; this module holds
      the transforms they share and the formatter used by the 400 handler
"""

import re
from datetime import date, datetime
from dataclasses import dataclass, field
from typing import Any, Iterable

from pydantic import BaseModel, ValidationError

_DIGITS = re.compile(r"[0-9]+")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_LOCATIONS = ("body", "path", "query", "header", "cookie")


def _parse_digits(value: Any, message: str) -> int:
    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        if value < 0:
            raise ValueError(message)
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    raise ValueError(message)


def parse_identifier(value: Any) -> int:
    """Path identifier: a run of ASCII digits, parsed to int."""
    return _parse_digits(value, "ID must be a number")


def parse_limit(value: Any) -> int:
    """Result-count limit from the query string."""
    return _parse_digits(value, "Limit must be a number")


def parse_iso_date(value: Any) -> Any:
    """Calendar date given as ``YYYY-MM-DD`` text.

    Pydantic's lax date mode reads numbers and digit strings as Unix
    timestamps; only ISO text (or an actual ``date``) gets through here.
    The calendar check itself is left to Pydantic.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, str) and _ISO_DATE.fullmatch(value):
        return value
    raise ValueError("Date must be in YYYY-MM-DD format")


def describe_errors(
    errors: Iterable[dict], location: str | None = None,
) -> list[dict]:
    """Flatten Pydantic/FastAPI error dicts into per-field entries.

    FastAPI prefixes ``loc`` with where the value came from (``body``,
    ``path``, ``query``); plain Pydantic does not, so the caller may supply
    the location explicitly.
    """
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        where = location
        if loc and loc[0] in _LOCATIONS:
            where = loc.pop(0)
        details.append({
            "field": ".".join(loc) or (where or ""),
            "location": where,
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        })
    return details


@dataclass
class ValidationOutcome:
    """Either a normalized value or the list of field failures."""
    value: BaseModel | None = None
    errors: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_payload(
    shape: type[BaseModel], raw: Any, location: str = "body",
) -> ValidationOutcome:
    """Check ``raw`` against ``shape`` without raising.

    Framework-independent entry point for callers outside the HTTP layer.
    Routes get the same checks from FastAPI, whose RequestValidationError is
    rendered through ``describe_errors`` in ``api.error_handlers``, so both
    paths report identical per-field entries.
    """
    try:
        return ValidationOutcome(value=shape.model_validate(raw))
    except ValidationError as e:
        return ValidationOutcome(errors=describe_errors(e.errors(), location))
