"""Player Routes — CRUD over /players, plus the legacy add/update/delete paths.

Invariants:
    - Body and path shapes are validated by FastAPI before the handler runs
    - Each handler makes exactly one RecordStore call
    - Legacy paths (/add-player, /update-player/{id}, /delete-player/{id})
      share handlers with the /players routes and are hidden from OpenAPI
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.api.params import EntityIdPath
from scoreboard.core.domain_types import EntityKind
from scoreboard.infrastructure.database import get_db
from scoreboard.schemas.common import DeletionMessage
from scoreboard.schemas.player import PlayerCreate, PlayerRead, PlayerUpdate
from scoreboard.services.record_store import RecordStore

router = APIRouter(tags=["players"])


def get_player_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return RecordStore(db, EntityKind.PLAYER)


@router.get("/players", response_model=list[PlayerRead])
async def list_players(store: RecordStore = Depends(get_player_store)):
    """All players, ordered by id."""
    rows = await store.list_all()
    return [PlayerRead.model_validate(r) for r in rows]


@router.get("/players/{player_id}", response_model=PlayerRead)
async def get_player(
    player_id: EntityIdPath, store: RecordStore = Depends(get_player_store),
):
    return PlayerRead.model_validate(await store.get(player_id))


@router.post(
    "/players", response_model=PlayerRead, status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/add-player", response_model=PlayerRead,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
async def create_player(
    body: PlayerCreate, store: RecordStore = Depends(get_player_store),
):
    """Create a player."""
    row = await store.create(body.model_dump())
    return PlayerRead.model_validate(row)


@router.put("/players/{player_id}", response_model=PlayerRead)
@router.put(
    "/update-player/{player_id}", response_model=PlayerRead,
    include_in_schema=False,
)
async def update_player(
    player_id: EntityIdPath,
    body: PlayerUpdate,
    store: RecordStore = Depends(get_player_store),
):
    """Partial update — omitted fields keep their stored values."""
    row = await store.update(player_id, body.changes())
    return PlayerRead.model_validate(row)


@router.delete("/players/{player_id}", response_model=DeletionMessage)
@router.delete(
    "/delete-player/{player_id}", response_model=DeletionMessage,
    include_in_schema=False,
)
async def delete_player(
    player_id: EntityIdPath, store: RecordStore = Depends(get_player_store),
):
    """Delete a player and, through the FK cascade, their scores."""
    await store.delete(player_id)
    return DeletionMessage(
        message=f"Player with ID {player_id} deleted successfully.",
    )
