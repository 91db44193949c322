"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - One manager (one engine, one pool) per process, created in the app lifespan
      and kept on app.state, never as a module global
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLAlchemy exceptions become StoreError subclasses with the driver message verbatim
    - SQLite connections run with foreign_keys=ON so cascades and FK checks apply

Design Decisions:
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from scoreboard.core.errors import (
    ErrorContext, IntegrityViolationError, StoreError, StoreUnavailableError,
)

logger = logging.getLogger(__name__)


def driver_message(exc: SQLAlchemyError) -> str:
    """The underlying driver's message, without SQLAlchemy's wrapper text.

    The asyncpg adapter re-raises driver errors as its own DBAPI classes
    with the text ``"<class '...'>: message"`` and chains the original via
    ``__cause__``; that original is what gets reported.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return str(exc)
    cause = orig.__cause__
    return str(cause if cause is not None else orig)


def translate_store_error(
    exc: SQLAlchemyError, operation: str, context: ErrorContext | None = None,
) -> StoreError:
    """Map a SQLAlchemy exception onto the StoreError hierarchy."""
    message = driver_message(exc)
    if isinstance(exc, IntegrityError):
        return IntegrityViolationError(message, operation, context)
    if isinstance(exc, OperationalError):
        return StoreUnavailableError(message, operation, context)
    return StoreError(message, operation, context=context)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on FK enforcement for every new SQLite connection."""
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        if database_url.startswith("sqlite"):
            self.engine = create_async_engine(database_url)
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise translate_store_error(e, "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise translate_store_error(e, "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise translate_store_error(e, "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise translate_store_error(e, "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close every pooled connection (app shutdown)."""
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
