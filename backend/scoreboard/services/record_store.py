"""Record Store — single-statement CRUD for players, games and scores.

Invariants:
    - create: INSERT ... RETURNING, returns the stored row
    - get/update/delete raise ResourceNotFoundError when no row matches
    - list_all is ordered by id ascending
    - update writes only the supplied fields; an empty change set issues no
      UPDATE and behaves as get()
    - delete relies on the store's ON DELETE CASCADE for dependent scores
"""

import logging
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.core.domain_types import EntityKind
from scoreboard.core.errors import ErrorContext, ResourceNotFoundError
from scoreboard.db.base import Base
from scoreboard.models import Game, Player, Score
from scoreboard.services.statements import StatementRunner

logger = logging.getLogger(__name__)

MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.PLAYER: Player,
    EntityKind.GAME: Game,
    EntityKind.SCORE: Score,
}


class RecordStore(StatementRunner):
    """CRUD executor for one entity kind."""

    def __init__(self, db: AsyncSession, entity: EntityKind):
        super().__init__(db)
        self.entity = entity
        self.model = MODELS[entity]

    def _context(self, entity_id: int | None = None) -> ErrorContext:
        return ErrorContext(entity=self.entity.label, entity_id=entity_id)

    def _not_found(self, entity_id: int) -> ResourceNotFoundError:
        return ResourceNotFoundError(self.entity.label, entity_id)

    async def create(self, data: dict[str, Any]) -> Base:
        stmt = insert(self.model).values(**data).returning(self.model)
        result = await self.execute(stmt, "insert", self._context())
        row = result.scalar_one()
        await self.commit("insert", self._context(row.id))
        logger.info(
            f"{self.entity.label} created",
            extra={"entity": self.entity.label, "entity_id": row.id},
        )
        return row

    async def get(self, entity_id: int) -> Base:
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.execute(stmt, "select", self._context(entity_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise self._not_found(entity_id)
        return row

    async def list_all(self) -> list[Base]:
        stmt = select(self.model).order_by(self.model.id.asc())
        result = await self.execute(stmt, "select", self._context())
        return list(result.scalars().all())

    async def update(self, entity_id: int, changes: dict[str, Any]) -> Base:
        if not changes:
            return await self.get(entity_id)
        stmt = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**changes)
            .returning(self.model)
        )
        result = await self.execute(stmt, "update", self._context(entity_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise self._not_found(entity_id)
        await self.commit("update", self._context(entity_id))
        logger.info(
            f"{self.entity.label} updated: {', '.join(sorted(changes))}",
            extra={"entity": self.entity.label, "entity_id": entity_id},
        )
        return row

    async def delete(self, entity_id: int) -> int:
        stmt = (
            delete(self.model)
            .where(self.model.id == entity_id)
            .returning(self.model.id)
        )
        result = await self.execute(stmt, "delete", self._context(entity_id))
        deleted_id = result.scalar_one_or_none()
        if deleted_id is None:
            raise self._not_found(entity_id)
        await self.commit("delete", self._context(entity_id))
        logger.info(
            f"{self.entity.label} deleted",
            extra={"entity": self.entity.label, "entity_id": entity_id},
        )
        return deleted_id
