"""Shared shape bases — strictness rules every entity schema inherits.

Invariants:
    - Unknown body fields are rejected, never dropped
    - Update shapes: an absent field means "keep", an explicit null is invalid
    - Read shapes build from ORM rows (from_attributes)
    - Body dates are YYYY-MM-DD text (IsoDate), never numeric timestamps
"""

from datetime import date
from typing import Annotated, Any

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, ValidationInfo, field_validator,
)

from scoreboard.core.validation import parse_iso_date

IsoDate = Annotated[date, BeforeValidator(parse_iso_date)]


class CreateShape(BaseModel):
    """Full-required shape for inserts."""
    model_config = ConfigDict(extra="forbid")


class UpdateShape(CreateShape):
    """All-optional shape for partial updates."""

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class ReadShape(BaseModel):
    """Row as returned to clients."""
    model_config = ConfigDict(from_attributes=True)


class DeletionMessage(BaseModel):
    message: str
