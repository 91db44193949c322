"""Report Queries — read-only cross-entity joins and aggregates.

Invariants:
    - Each report is one fixed SELECT; no client-side sorting or summing
    - top_players groups by player id, so two players sharing a name stay separate
    - Ties in top_players and popular_genres follow the store's own ordering
    - recent_players binds ``today - 30 days`` as the cutoff parameter
"""

from datetime import date

from sqlalchemy import func, select

from scoreboard.core.domain_types import RECENT_PLAYERS_WINDOW, TOP_PLAYERS_LIMIT
from scoreboard.models import Game, Player, Score
from scoreboard.services.statements import StatementRunner


class ReportQueries(StatementRunner):
    """Aggregate reports across players, games and scores."""

    async def _rows(self, stmt, operation: str) -> list[dict]:
        result = await self.execute(stmt, operation)
        return [dict(row) for row in result.mappings().all()]

    async def players_scores(self, limit: int | None = None) -> list[dict]:
        """Every (player, game, score) triple, by player name then game title.

        A falsy limit (None or 0) returns all rows.
        """
        stmt = (
            select(Player.name, Game.title, Score.score)
            .select_from(Player)
            .join(Score, Score.player_id == Player.id)
            .join(Game, Game.id == Score.game_id)
            .order_by(Player.name, Game.title)
        )
        if limit:
            stmt = stmt.limit(limit)
        return await self._rows(stmt, "players_scores")

    async def top_players(self) -> list[dict]:
        total_score = func.sum(Score.score).label("total_score")
        stmt = (
            select(Player.name, total_score)
            .join(Score, Score.player_id == Player.id)
            .group_by(Player.id, Player.name)
            .order_by(total_score.desc())
            .limit(TOP_PLAYERS_LIMIT)
        )
        return await self._rows(stmt, "top_players")

    async def inactive_players(self) -> list[dict]:
        """Players without a single recorded score."""
        stmt = (
            select(Player.name)
            .outerjoin(Score, Score.player_id == Player.id)
            .where(Score.id.is_(None))
            .order_by(Player.id)
        )
        return await self._rows(stmt, "inactive_players")

    async def popular_genres(self) -> list[dict]:
        times_played = func.count(Score.id).label("times_played")
        stmt = (
            select(Game.genre, times_played)
            .join(Score, Score.game_id == Game.id)
            .group_by(Game.genre)
            .order_by(times_played.desc())
            .limit(1)
        )
        return await self._rows(stmt, "popular_genres")

    async def recent_players(self, today: date | None = None) -> list[dict]:
        cutoff = (today or date.today()) - RECENT_PLAYERS_WINDOW
        stmt = (
            select(Player.name, Player.join_date)
            .where(Player.join_date >= cutoff)
            .order_by(Player.join_date.desc())
        )
        return await self._rows(stmt, "recent_players")
