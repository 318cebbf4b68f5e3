"""Guest domain model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hotel_api.database import Base


class Guest(Base):
    """Guest model — a person staying in a room."""

    __tablename__ = "guests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    passport: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    # Not a foreign key: deleting a room leaves its guests in place
    room_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Guest(id={self.id}, passport={self.passport!r}, room_id={self.room_id})>"
