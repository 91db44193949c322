"""Game Schemas — title and genre are non-empty text."""

from typing import Annotated

from pydantic import Field

from scoreboard.schemas.common import CreateShape, ReadShape, UpdateShape

NonEmptyText = Annotated[str, Field(min_length=1)]


class GameCreate(CreateShape):
    title: NonEmptyText
    genre: NonEmptyText


class GameUpdate(UpdateShape):
    title: NonEmptyText | None = None
    genre: NonEmptyText | None = None


class GameRead(ReadShape):
    id: int
    title: str
    genre: str
