"""Guests CRUD API router."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.api.deps import get_db, valid_guest_id
from hotel_api.schemas.common import ResultResponse
from hotel_api.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from hotel_api.services import guest_service

router = APIRouter(tags=["guests"])


@router.get(
    "/guests",
    response_model=list[GuestResponse],
    response_model_exclude_none=True,
    summary="List guests",
)
async def list_guests(db: AsyncSession = Depends(get_db)) -> list[GuestResponse]:
    return await guest_service.list_guests(db)


@router.post(
    "/guest",
    response_model=GuestResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Check in a new guest",
)
async def create_guest(
    body: GuestCreate,
    db: AsyncSession = Depends(get_db),
) -> GuestResponse:
    """Create a guest in an existing, unoccupied room.

    Fails with 500 if the room does not exist, is already occupied, or the
    passport is already registered.
    """
    return await guest_service.create_guest(db, body)


@router.get(
    "/guest/{guest_id:digits}",
    response_model=GuestResponse,
    response_model_exclude_none=True,
    summary="Get a guest by ID",
)
async def get_guest(
    guest_id: int = Depends(valid_guest_id),
    db: AsyncSession = Depends(get_db),
) -> GuestResponse:
    return await guest_service.get_guest(db, guest_id)


@router.put(
    "/guest/{guest_id:digits}",
    response_model=GuestResponse,
    response_model_exclude_none=True,
    summary="Replace a guest",
)
async def update_guest(
    body: GuestUpdate,
    guest_id: int = Depends(valid_guest_id),
    db: AsyncSession = Depends(get_db),
) -> GuestResponse:
    """Replace all fields of a guest. Occupancy is not re-checked."""
    return await guest_service.update_guest(db, guest_id, body)


@router.delete(
    "/guest/{guest_id:digits}",
    response_model=ResultResponse,
    summary="Delete a guest",
)
async def delete_guest(
    guest_id: int = Depends(valid_guest_id),
    db: AsyncSession = Depends(get_db),
) -> ResultResponse:
    await guest_service.delete_guest(db, guest_id)
    return ResultResponse()
