"""Score Routes — CRUD over /scores.

Invariants:
    - player_id/game_id existence is the store's FK check: a dangling
      reference surfaces as a 500 INTEGRITY_ERROR, never a silent insert
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.api.params import EntityIdPath
from scoreboard.core.domain_types import EntityKind
from scoreboard.infrastructure.database import get_db
from scoreboard.schemas.common import DeletionMessage
from scoreboard.schemas.score import ScoreCreate, ScoreRead, ScoreUpdate
from scoreboard.services.record_store import RecordStore

router = APIRouter(prefix="/scores", tags=["scores"])


def get_score_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return RecordStore(db, EntityKind.SCORE)


@router.get("", response_model=list[ScoreRead])
async def list_scores(store: RecordStore = Depends(get_score_store)):
    return [ScoreRead.model_validate(r) for r in await store.list_all()]


@router.get("/{score_id}", response_model=ScoreRead)
async def get_score(
    score_id: EntityIdPath, store: RecordStore = Depends(get_score_store),
):
    return ScoreRead.model_validate(await store.get(score_id))


@router.post("", response_model=ScoreRead, status_code=status.HTTP_201_CREATED)
async def create_score(
    body: ScoreCreate, store: RecordStore = Depends(get_score_store),
):
    return ScoreRead.model_validate(await store.create(body.model_dump()))


@router.put("/{score_id}", response_model=ScoreRead)
async def update_score(
    score_id: EntityIdPath,
    body: ScoreUpdate,
    store: RecordStore = Depends(get_score_store),
):
    return ScoreRead.model_validate(await store.update(score_id, body.changes()))


@router.delete("/{score_id}", response_model=DeletionMessage)
async def delete_score(
    score_id: EntityIdPath, store: RecordStore = Depends(get_score_store),
):
    await store.delete(score_id)
    return DeletionMessage(message=f"Score with ID {score_id} deleted successfully.")
