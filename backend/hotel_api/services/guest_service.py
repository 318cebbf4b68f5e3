"""Guest service — CRUD operations for guests."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.errors import ConstraintViolationError, NotFoundError
from hotel_api.models.guest import Guest
from hotel_api.schemas.guest import GuestCreate, GuestResponse, GuestUpdate
from hotel_api.services.occupancy import ensure_room_available

logger = logging.getLogger(__name__)


async def create_guest(db: AsyncSession, body: GuestCreate) -> GuestResponse:
    """Check in a new guest.

    The occupancy rule runs first, in the same transaction as the insert, so
    a rejected guest is never persisted. Raises InvalidReferenceError or
    RoomOccupiedError from the rule, ConstraintViolationError on a duplicate
    passport.
    """
    await ensure_room_available(db, body.room_id)

    guest = Guest(**body.model_dump())
    db.add(guest)
    try:
        await db.flush()
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc

    logger.info("Created guest %s in room %s", guest.id, guest.room_id)
    return GuestResponse.model_validate(guest)


async def get_guest(db: AsyncSession, guest_id: int) -> GuestResponse:
    result = await db.execute(select(Guest).where(Guest.id == guest_id))
    guest = result.scalar_one_or_none()

    if guest is None:
        raise NotFoundError("Guest")

    return GuestResponse.model_validate(guest)


async def update_guest(db: AsyncSession, guest_id: int, body: GuestUpdate) -> GuestResponse:
    """Replace every mutable field of a guest.

    Occupancy is not re-checked here, so moving a guest into an occupied room
    succeeds. Updating an ID with no row is a no-op.
    """
    try:
        result = await db.execute(
            update(Guest).where(Guest.id == guest_id).values(**body.model_dump())
        )
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc

    if result.rowcount == 0:
        logger.info("Update of guest %s matched no rows", guest_id)
    return GuestResponse(id=guest_id, **body.model_dump())


async def delete_guest(db: AsyncSession, guest_id: int) -> None:
    await db.execute(delete(Guest).where(Guest.id == guest_id))
    logger.info("Deleted guest %s", guest_id)


async def list_guests(db: AsyncSession) -> list[GuestResponse]:
    """Return all guests ordered by ID."""
    result = await db.execute(select(Guest).order_by(Guest.id))
    return [GuestResponse.model_validate(guest) for guest in result.scalars().all()]
