"""Domain Types — identifiers and entity kinds shared across layers.

Invariants:
    - PlayerId, GameId, ScoreId wrap store-assigned integers
    - EntityKind is the only place entity display names are spelled out
    - All report limits/windows are defined here, not in SQL strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for EntityKind: serializes to JSON without custom encoders
"""

from datetime import timedelta
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PlayerId = NewType("PlayerId", int)
GameId = NewType("GameId", int)
ScoreId = NewType("ScoreId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The three managed record types. Value is the table name."""
    PLAYER = "players"
    GAME = "games"
    SCORE = "scores"

    @property
    def label(self) -> str:
        """Human-readable singular name used in messages."""
        return self.name.capitalize()


# ─── Report constants ────────────────────────────────────────────

TOP_PLAYERS_LIMIT = 3
RECENT_PLAYERS_WINDOW = timedelta(days=30)
