"""Report Schemas — rows produced by the aggregate join queries."""

from datetime import date

from pydantic import BaseModel


class PlayerScoreRow(BaseModel):
    name: str
    title: str
    score: int


class TopPlayer(BaseModel):
    name: str
    total_score: int


class InactivePlayer(BaseModel):
    name: str


class GenrePopularity(BaseModel):
    genre: str
    times_played: int


class RecentPlayer(BaseModel):
    name: str
    join_date: date
