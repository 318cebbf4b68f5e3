"""Shared API dependencies — single import point for all routers.

Re-exports the database session dependency and the path-identifier checks so
that router modules can import everything they need from one place::

    from hotel_api.api.deps import get_db, valid_room_id

Importing this module registers the ``digits`` path convertor used by the
routers (``/room/{room_id:digits}``), so it must be imported before any
route declares it.
"""

from starlette.convertors import Convertor, register_url_convertor

from hotel_api.database import get_db
from hotel_api.errors import InvalidInputError

# Identifiers are PostgreSQL SERIAL (32-bit signed) columns
MAX_ID = 2**31 - 1
_MAX_ID_DIGITS = len(str(MAX_ID))


class DigitsConvertor(Convertor):
    """Match ``[0-9]+`` but leave the value as text.

    Starlette's ``int`` convertor calls ``int()`` while routing, which raises
    for strings past the interpreter's digit limit. Parsing is left to
    ``valid_room_id`` / ``valid_guest_id`` instead.
    """

    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("digits", DigitsConvertor())


def _parse_id(raw: str, message: str) -> int:
    digits = raw.lstrip("0") or "0"
    if len(digits) > _MAX_ID_DIGITS:
        raise InvalidInputError(message)
    value = int(digits)
    if value > MAX_ID:
        raise InvalidInputError(message)
    return value


def valid_room_id(room_id: str) -> int:
    """Parse a room ID, rejecting values the store cannot hold."""
    return _parse_id(room_id, "Invalid room ID")


def valid_guest_id(guest_id: str) -> int:
    """Parse a guest ID, rejecting values the store cannot hold."""
    return _parse_id(guest_id, "Invalid guest ID")


__all__ = [
    "MAX_ID",
    "get_db",
    "valid_room_id",
    "valid_guest_id",
]
