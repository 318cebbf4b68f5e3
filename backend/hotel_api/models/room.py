"""Room model — numbered hotel rooms."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hotel_api.database import Base


class Room(Base):
    """A hotel room. Guests are linked by ``room_id`` only, without a foreign key."""

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    number: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    params: Mapped[str | None] = mapped_column(Text, default=None)
    beds: Mapped[int | None] = mapped_column(Integer, default=None)

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number={self.number})>"
