"""Room service — persistence for rooms and the rooms-with-guests view."""

import logging
from collections import defaultdict

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.errors import ConstraintViolationError, NotFoundError
from hotel_api.models.guest import Guest
from hotel_api.models.room import Room
from hotel_api.schemas.guest import GuestResponse
from hotel_api.schemas.room import RoomCreate, RoomResponse, RoomUpdate

logger = logging.getLogger(__name__)


async def create_room(db: AsyncSession, body: RoomCreate) -> RoomResponse:
    """Insert a room and return it with the store-generated ID.

    Raises ConstraintViolationError if the room number is already taken.
    """
    room = Room(**body.model_dump())
    db.add(room)
    try:
        await db.flush()
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc

    logger.info("Created room %s (number %s)", room.id, room.number)
    return RoomResponse.model_validate(room)


async def get_room(db: AsyncSession, room_id: int) -> RoomResponse:
    """Return a single room. Raises NotFoundError if no row matches."""
    result = await db.execute(select(Room).where(Room.id == room_id))
    room = result.scalar_one_or_none()

    if room is None:
        raise NotFoundError("Room")

    return RoomResponse.model_validate(room)


async def update_room(db: AsyncSession, room_id: int, body: RoomUpdate) -> RoomResponse:
    """Replace every mutable field of a room.

    Updating an ID with no row is a no-op; the submitted record is returned
    either way.
    """
    try:
        result = await db.execute(
            update(Room).where(Room.id == room_id).values(**body.model_dump())
        )
    except IntegrityError as exc:
        raise ConstraintViolationError(str(exc.orig)) from exc

    if result.rowcount == 0:
        logger.info("Update of room %s matched no rows", room_id)
    return RoomResponse(id=room_id, **body.model_dump())


async def delete_room(db: AsyncSession, room_id: int) -> None:
    """Delete a room by ID. Its guests are left untouched; no-op if absent."""
    await db.execute(delete(Room).where(Room.id == room_id))
    logger.info("Deleted room %s", room_id)


async def list_rooms(db: AsyncSession) -> list[RoomResponse]:
    """Return all rooms ordered by ID, without guests."""
    result = await db.execute(select(Room).order_by(Room.id))
    return [RoomResponse.model_validate(room) for room in result.scalars().all()]


async def list_rooms_with_guests(db: AsyncSession) -> list[RoomResponse]:
    """Return all rooms ordered by ID, each with its guests nested.

    Issues one query for the rooms and one for every guest of those rooms,
    then groups the guests in memory. Rooms without guests get an empty list.
    """
    rooms = await list_rooms(db)
    if not rooms:
        return []

    result = await db.execute(
        select(Guest)
        .where(Guest.room_id.in_([room.id for room in rooms]))
        .order_by(Guest.id)
    )
    # Nested guests are keyed by their room already; room_id is left unset
    guests_by_room: dict[int, list[GuestResponse]] = defaultdict(list)
    for guest in result.scalars().all():
        guests_by_room[guest.room_id].append(
            GuestResponse(id=guest.id, name=guest.name, passport=guest.passport)
        )

    for room in rooms:
        room.guests = guests_by_room.get(room.id, [])
    return rooms


async def list_guests_in_room(db: AsyncSession, room_id: int) -> list[GuestResponse]:
    """Return the guests whose ``room_id`` matches, ordered by ID."""
    result = await db.execute(
        select(Guest).where(Guest.room_id == room_id).order_by(Guest.id)
    )
    return [GuestResponse.model_validate(guest) for guest in result.scalars().all()]
