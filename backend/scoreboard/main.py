"""Scoreboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ScoreboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The database pool is created in the lifespan and stored on app.state;
      handlers reach it only through the get_db dependency
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scoreboard.api.error_handlers import register_error_handlers
from scoreboard.api.routes import games, health, players, reports, scores
from scoreboard.config import get_settings
from scoreboard.infrastructure.database import DatabaseSessionManager
from scoreboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Scoreboard API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Scoreboard API shutting down")


app = FastAPI(
    title="Scoreboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(players.router)
app.include_router(games.router)
app.include_router(scores.router)
app.include_router(reports.router)

register_error_handlers(app)
