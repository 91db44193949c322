"""Request Parameters — path and query shapes shared by route modules.

Invariants:
    - Path identifiers and query limits must be all-digit strings; anything
      else is a 400 before the handler runs
"""

from typing import Annotated

from fastapi import Path, Query
from pydantic import BeforeValidator

from scoreboard.core.validation import parse_identifier, parse_limit

EntityIdPath = Annotated[
    int,
    BeforeValidator(parse_identifier),
    Path(description="Store-assigned numeric identifier"),
]

LimitQuery = Annotated[
    int | None,
    BeforeValidator(parse_limit),
    Query(description="Maximum number of rows; 0 or absent means all"),
]
