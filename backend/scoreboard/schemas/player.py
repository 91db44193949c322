"""Player Schemas — create/update/read shapes.

Invariants:
    - name: at least 2 characters
    - join_date: ISO calendar date
"""

from datetime import date
from typing import Annotated

from pydantic import Field

from scoreboard.schemas.common import CreateShape, IsoDate, ReadShape, UpdateShape

PlayerName = Annotated[str, Field(min_length=2)]


class PlayerCreate(CreateShape):
    name: PlayerName
    join_date: IsoDate


class PlayerUpdate(UpdateShape):
    name: PlayerName | None = None
    join_date: IsoDate | None = None


class PlayerRead(ReadShape):
    id: int
    name: str
    join_date: date
