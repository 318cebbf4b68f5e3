"""Occupancy rule — a room hosts at most one guest at a time.

Enforced only when a guest is created; updates may move a guest anywhere.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.errors import InvalidReferenceError, RoomOccupiedError
from hotel_api.models.room import Room
from hotel_api.services.room_service import list_guests_in_room

logger = logging.getLogger(__name__)


async def ensure_room_available(db: AsyncSession, room_id: int) -> None:
    """Raise unless ``room_id`` names an existing room with no guests.

    Must run before the new guest is inserted, in the same transaction. The
    room row is locked (``FOR UPDATE``) until that transaction ends, so
    concurrent check-ins for the same room are serialized. SQLite has no row
    locks; there the engine opens every transaction with ``BEGIN IMMEDIATE``
    (see ``hotel_api.database``).
    """
    result = await db.execute(
        select(Room.id).where(Room.id == room_id).with_for_update()
    )
    if result.scalar_one_or_none() is None:
        raise InvalidReferenceError(f"Room with ID: {room_id} does not exist")

    occupants = await list_guests_in_room(db, room_id)
    if occupants:
        logger.warning(
            "Rejected check-in to room %s, occupied by guest %s",
            room_id,
            occupants[0].id,
        )
        raise RoomOccupiedError(f"Room with ID: {room_id} already occupied")
