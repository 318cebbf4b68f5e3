"""Pydantic v2 request/response schemas for guest endpoints."""

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class GuestCreate(BaseModel):
    """Schema for creating a guest. Omitted or null fields take their zero value."""

    name: StrictStr = ""
    passport: StrictStr = ""
    room_id: StrictInt = 0

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "passport", mode="before")
    @classmethod
    def _null_str(cls, value: str | None) -> str:
        return "" if value is None else value

    @field_validator("room_id", mode="before")
    @classmethod
    def _null_int(cls, value: int | None) -> int:
        return 0 if value is None else value


class GuestUpdate(GuestCreate):
    """Schema for updating a guest. Full replace: omitted fields reset to zero."""


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class GuestResponse(BaseModel):
    """Public guest information. ``room_id`` is dropped from the JSON when zero."""

    id: int
    name: str
    passport: str
    room_id: int | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("room_id")
    @classmethod
    def _zero_room_as_unset(cls, value: int | None) -> int | None:
        return value or None
