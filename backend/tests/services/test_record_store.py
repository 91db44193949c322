"""RecordStore — single-statement CRUD against the test database.

Invariants:
    - Missing rows raise ResourceNotFoundError with the entity label
    - update() with no changes issues no UPDATE
    - delete() leaves dependent scores to the FK cascade
"""

from datetime import date

import pytest

from scoreboard.core.domain_types import EntityKind
from scoreboard.core.errors import IntegrityViolationError, ResourceNotFoundError
from scoreboard.services.record_store import RecordStore


@pytest.fixture
def players(test_db):
    return RecordStore(test_db, EntityKind.PLAYER)


@pytest.fixture
def games(test_db):
    return RecordStore(test_db, EntityKind.GAME)


@pytest.fixture
def scores(test_db):
    return RecordStore(test_db, EntityKind.SCORE)


async def test_create_returns_stored_row(players):
    row = await players.create({"name": "Ada", "join_date": date(2024, 1, 1)})
    assert row.id == 1
    assert row.name == "Ada"
    assert row.join_date == date(2024, 1, 1)


async def test_get_missing_raises_not_found(games):
    with pytest.raises(ResourceNotFoundError) as exc:
        await games.get(12)
    assert exc.value.message == "Game with ID 12 not found"


async def test_list_all_orders_by_id(games):
    for title in ("b", "a", "c"):
        await games.create({"title": title, "genre": "g"})
    rows = await games.list_all()
    assert [r.id for r in rows] == [1, 2, 3]
    assert [r.title for r in rows] == ["b", "a", "c"]


async def test_update_merges_supplied_fields(players):
    row = await players.create({"name": "Ada", "join_date": date(2024, 1, 1)})
    updated = await players.update(row.id, {"name": "Ada L."})
    assert updated.name == "Ada L."
    assert updated.join_date == date(2024, 1, 1)


async def test_update_without_changes_reads_row(players, monkeypatch):
    row = await players.create({"name": "Ada", "join_date": date(2024, 1, 1)})
    statements = []
    original = players.execute

    async def spy(stmt, operation, context=None):
        statements.append(operation)
        return await original(stmt, operation, context)

    monkeypatch.setattr(players, "execute", spy)
    same = await players.update(row.id, {})
    assert same.id == row.id
    assert statements == ["select"]


async def test_update_missing_raises_not_found(players):
    with pytest.raises(ResourceNotFoundError):
        await players.update(5, {"name": "Ghost"})


async def test_delete_returns_id_and_cascades(players, games, scores):
    player = await players.create({"name": "Ada", "join_date": date(2024, 1, 1)})
    game = await games.create({"title": "Tetris", "genre": "Puzzle"})
    score = await scores.create({
        "player_id": player.id, "game_id": game.id,
        "score": 10, "date_played": date(2024, 1, 2),
    })

    assert await players.delete(player.id) == player.id
    with pytest.raises(ResourceNotFoundError):
        await scores.get(score.id)


async def test_delete_missing_raises_not_found(scores):
    with pytest.raises(ResourceNotFoundError) as exc:
        await scores.delete(3)
    assert exc.value.context.entity == "Score"


async def test_fk_violation_raises_integrity_error(scores):
    with pytest.raises(IntegrityViolationError) as exc:
        await scores.create({
            "player_id": 1, "game_id": 1, "score": 0,
            "date_played": date(2024, 1, 1),
        })
    assert exc.value.operation == "insert"
    assert exc.value.http_status == 500
    assert await scores.list_all() == []
