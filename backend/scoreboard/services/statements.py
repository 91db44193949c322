"""Statement Runner — executes one statement and maps store failures.

Invariants:
    - Every statement goes through execute(); every write through commit()
    - On any SQLAlchemyError the session is rolled back before StoreError is raised
"""

import logging

from sqlalchemy.engine import Result
from sqlalchemy.sql.expression import Executable
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.core.errors import ErrorContext
from scoreboard.infrastructure.database import translate_store_error

logger = logging.getLogger(__name__)


class StatementRunner:
    """Base for services that talk to the store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def execute(
        self, stmt: Executable, operation: str, context: ErrorContext | None = None,
    ) -> Result:
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self._fail(e, operation, context)

    async def commit(
        self, operation: str, context: ErrorContext | None = None,
    ) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e, operation, context)

    async def _fail(
        self, exc: SQLAlchemyError, operation: str, context: ErrorContext | None,
    ):
        await self.db.rollback()
        error = translate_store_error(exc, operation, context)
        logger.error(
            f"Store {operation} failed: {error.message}",
            extra={
                "error_code": error.code,
                "operation": operation,
                "entity": error.context.entity,
                "entity_id": error.context.entity_id,
            },
        )
        raise error from exc
