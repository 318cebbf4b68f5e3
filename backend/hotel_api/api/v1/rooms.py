"""Rooms CRUD API router.

``GET /rooms`` returns every room with its guests nested; the single-room
endpoints live under ``/room``.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.api.deps import get_db, valid_room_id
from hotel_api.schemas.common import ResultResponse
from hotel_api.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from hotel_api.services import room_service

router = APIRouter(tags=["rooms"])


@router.get(
    "/rooms",
    response_model=list[RoomResponse],
    response_model_exclude_none=True,
    summary="List rooms with their guests",
)
async def list_rooms(db: AsyncSession = Depends(get_db)) -> list[RoomResponse]:
    """Return all rooms ordered by ID. Rooms without guests carry an empty list."""
    return await room_service.list_rooms_with_guests(db)


@router.post(
    "/room",
    response_model=RoomResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new room",
)
async def create_room(
    body: RoomCreate,
    db: AsyncSession = Depends(get_db),
) -> RoomResponse:
    """Create a room. A duplicate room number fails with 500 and the store's message."""
    return await room_service.create_room(db, body)


@router.get(
    "/room/{room_id:digits}",
    response_model=RoomResponse,
    response_model_exclude_none=True,
    summary="Get a room by ID",
)
async def get_room(
    room_id: int = Depends(valid_room_id),
    db: AsyncSession = Depends(get_db),
) -> RoomResponse:
    return await room_service.get_room(db, room_id)


@router.put(
    "/room/{room_id:digits}",
    response_model=RoomResponse,
    response_model_exclude_none=True,
    summary="Replace a room",
)
async def update_room(
    body: RoomUpdate,
    room_id: int = Depends(valid_room_id),
    db: AsyncSession = Depends(get_db),
) -> RoomResponse:
    """Replace all fields of a room. The path ID wins over any ID in the body."""
    return await room_service.update_room(db, room_id, body)


@router.delete(
    "/room/{room_id:digits}",
    response_model=ResultResponse,
    summary="Delete a room",
)
async def delete_room(
    room_id: int = Depends(valid_room_id),
    db: AsyncSession = Depends(get_db),
) -> ResultResponse:
    """Delete a room. Its guests are kept."""
    await room_service.delete_room(db, room_id)
    return ResultResponse()
