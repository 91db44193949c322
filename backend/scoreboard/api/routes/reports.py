"""Report Routes — read-only aggregate endpoints.

Invariants:
    - /players-scores is the only report taking input (optional ?limit=)
    - /top-players returns at most 3 rows, highest total first
    - /popular-genres returns a list holding at most one row
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.api.params import LimitQuery
from scoreboard.infrastructure.database import get_db
from scoreboard.schemas.report import (
    GenrePopularity, InactivePlayer, PlayerScoreRow, RecentPlayer, TopPlayer,
)
from scoreboard.services.report_queries import ReportQueries

router = APIRouter(tags=["reports"])


def get_report_queries(db: AsyncSession = Depends(get_db)) -> ReportQueries:
    return ReportQueries(db)


@router.get("/players-scores", response_model=list[PlayerScoreRow])
async def players_scores(
    limit: LimitQuery = None,
    reports: ReportQueries = Depends(get_report_queries),
):
    """Every player/game/score triple, sorted by player name and game title."""
    return await reports.players_scores(limit)


@router.get("/top-players", response_model=list[TopPlayer])
async def top_players(reports: ReportQueries = Depends(get_report_queries)):
    """Top 3 players by summed score."""
    return await reports.top_players()


@router.get("/inactive-players", response_model=list[InactivePlayer])
async def inactive_players(reports: ReportQueries = Depends(get_report_queries)):
    """Players who have not recorded any score."""
    return await reports.inactive_players()


@router.get("/popular-genres", response_model=list[GenrePopularity])
async def popular_genres(reports: ReportQueries = Depends(get_report_queries)):
    """The most played genre."""
    return await reports.popular_genres()


@router.get("/recent-players", response_model=list[RecentPlayer])
async def recent_players(reports: ReportQueries = Depends(get_report_queries)):
    """Players who joined within the last 30 days, newest first."""
    return await reports.recent_players()
