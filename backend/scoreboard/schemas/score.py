"""Score Schemas — create/update/read shapes.

Invariants:
    - player_id, game_id, score are JSON integers (numeric strings rejected)
    - score >= 0
    - Existence of player_id/game_id is NOT checked here; the store's FK does that
"""

from datetime import date
from typing import Annotated

from pydantic import Field, StrictInt

from scoreboard.schemas.common import CreateShape, IsoDate, ReadShape, UpdateShape

ScoreValue = Annotated[StrictInt, Field(ge=0)]


class ScoreCreate(CreateShape):
    player_id: StrictInt
    game_id: StrictInt
    score: ScoreValue
    date_played: IsoDate


class ScoreUpdate(UpdateShape):
    player_id: StrictInt | None = None
    game_id: StrictInt | None = None
    score: ScoreValue | None = None
    date_played: IsoDate | None = None


class ScoreRead(ReadShape):
    id: int
    player_id: int
    game_id: int
    score: int
    date_played: date
