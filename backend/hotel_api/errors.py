"""Error taxonomy shared by the service layer and the HTTP handlers.

Every error carries the HTTP status it maps to, so handlers branch on the
exception type rather than on its message.
"""

from fastapi import status


class HotelError(Exception):
    """Base class for all domain and store errors surfaced to clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(HotelError):
    """Malformed path identifier or request body."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(HotelError):
    """No row matches the identifier on a point read."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class ConstraintViolationError(HotelError):
    """A unique field (room number, guest passport) collided in the store."""


class InvalidReferenceError(HotelError):
    """A guest references a room that does not exist."""


class RoomOccupiedError(HotelError):
    """The room already hosts a guest."""
