"""ReportQueries — aggregate statements against the test database."""

from datetime import date, timedelta

import pytest

from scoreboard.core.domain_types import EntityKind
from scoreboard.services.record_store import RecordStore
from scoreboard.services.report_queries import ReportQueries


@pytest.fixture
async def seeded(test_db):
    players = RecordStore(test_db, EntityKind.PLAYER)
    games = RecordStore(test_db, EntityKind.GAME)
    scores = RecordStore(test_db, EntityKind.SCORE)
    today = date(2024, 6, 30)
    ada = await players.create({"name": "Ada", "join_date": today})
    bob = await players.create({"name": "Bob", "join_date": today - timedelta(days=45)})
    await players.create({"name": "Cy", "join_date": today - timedelta(days=10)})
    chess = await games.create({"title": "Chess", "genre": "Board"})
    go = await games.create({"title": "Go", "genre": "Board"})
    quake = await games.create({"title": "Quake", "genre": "Shooter"})
    for player, game, value in [
        (ada, chess, 7), (ada, quake, 3), (bob, go, 4), (bob, chess, 1),
    ]:
        await scores.create({
            "player_id": player.id, "game_id": game.id,
            "score": value, "date_played": today,
        })
    return today


async def test_players_scores_limit_applied(test_db, seeded):
    rows = await ReportQueries(test_db).players_scores(limit=3)
    assert rows == [
        {"name": "Ada", "title": "Chess", "score": 7},
        {"name": "Ada", "title": "Quake", "score": 3},
        {"name": "Bob", "title": "Chess", "score": 1},
    ]


async def test_players_scores_none_limit_returns_all(test_db, seeded):
    assert len(await ReportQueries(test_db).players_scores()) == 4


async def test_top_players_totals(test_db, seeded):
    rows = await ReportQueries(test_db).top_players()
    assert rows == [
        {"name": "Ada", "total_score": 10},
        {"name": "Bob", "total_score": 5},
    ]


async def test_inactive_players(test_db, seeded):
    assert await ReportQueries(test_db).inactive_players() == [{"name": "Cy"}]


async def test_popular_genres_counts_plays(test_db, seeded):
    rows = await ReportQueries(test_db).popular_genres()
    assert rows == [{"genre": "Board", "times_played": 3}]


async def test_recent_players_uses_given_today(test_db, seeded):
    rows = await ReportQueries(test_db).recent_players(today=seeded)
    assert [r["name"] for r in rows] == ["Ada", "Cy"]
    assert rows[0]["join_date"] == seeded
