"""Game Routes — CRUD over /games.

Invariants:
    - Mirrors the player routes: 201 on create, 404 on unknown id
    - Deleting a game removes its scores through the store's cascade
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.api.params import EntityIdPath
from scoreboard.core.domain_types import EntityKind
from scoreboard.infrastructure.database import get_db
from scoreboard.schemas.common import DeletionMessage
from scoreboard.schemas.game import GameCreate, GameRead, GameUpdate
from scoreboard.services.record_store import RecordStore

router = APIRouter(prefix="/games", tags=["games"])


def get_game_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return RecordStore(db, EntityKind.GAME)


@router.get("", response_model=list[GameRead])
async def list_games(store: RecordStore = Depends(get_game_store)):
    return [GameRead.model_validate(r) for r in await store.list_all()]


@router.get("/{game_id}", response_model=GameRead)
async def get_game(
    game_id: EntityIdPath, store: RecordStore = Depends(get_game_store),
):
    return GameRead.model_validate(await store.get(game_id))


@router.post("", response_model=GameRead, status_code=status.HTTP_201_CREATED)
async def create_game(
    body: GameCreate, store: RecordStore = Depends(get_game_store),
):
    return GameRead.model_validate(await store.create(body.model_dump()))


@router.put("/{game_id}", response_model=GameRead)
async def update_game(
    game_id: EntityIdPath,
    body: GameUpdate,
    store: RecordStore = Depends(get_game_store),
):
    return GameRead.model_validate(await store.update(game_id, body.changes()))


@router.delete("/{game_id}", response_model=DeletionMessage)
async def delete_game(
    game_id: EntityIdPath, store: RecordStore = Depends(get_game_store),
):
    await store.delete(game_id)
    return DeletionMessage(message=f"Game with ID {game_id} deleted successfully.")
