"""SQLAlchemy models for the Hotel Rooms API.

All models are imported here so that ``Base.metadata.create_all`` can
discover them at startup. If you add a new model, import it in this file.
"""

from hotel_api.models.guest import Guest
from hotel_api.models.room import Room

__all__ = [
    "Guest",
    "Room",
]
