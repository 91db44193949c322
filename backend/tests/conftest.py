"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign_keys=ON
    - get_db dependency overridden to use the test database
    - app.state.db_manager points at the test engine (readiness probe)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; FK pragma makes cascades
      and FK violations behave like PostgreSQL
    - API tests seed through HTTP, service tests through test_db — never both
      in one test, since StaticPool shares a single connection
"""

import os

# Settings are read at import time by scoreboard.main
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from scoreboard.db.base import Base  # noqa: E402
import scoreboard.models  # noqa: E402, F401
from scoreboard.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from scoreboard.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


@pytest.fixture
def create_player(client):
    """POST a player and return the JSON body."""
    async def _create(name: str = "Ada", join_date: str = "2024-01-01") -> dict:
        res = await client.post(
            "/players", json={"name": name, "join_date": join_date},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_game(client):
    async def _create(title: str = "Tetris", genre: str = "Puzzle") -> dict:
        res = await client.post("/games", json={"title": title, "genre": genre})
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_score(client):
    async def _create(
        player_id: int, game_id: int, score: int = 100,
        date_played: str = "2024-02-01",
    ) -> dict:
        res = await client.post("/scores", json={
            "player_id": player_id, "game_id": game_id,
            "score": score, "date_played": date_played,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _create
