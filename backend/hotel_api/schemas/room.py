"""Pydantic v2 request/response schemas for room endpoints."""

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator

from hotel_api.schemas.guest import GuestResponse

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RoomCreate(BaseModel):
    """Schema for creating a room. Omitted or null fields take their zero value."""

    number: StrictInt = 0
    params: StrictStr = ""
    beds: StrictInt = 0

    model_config = ConfigDict(extra="ignore")

    @field_validator("number", "beds", mode="before")
    @classmethod
    def _null_int(cls, value: int | None) -> int:
        return 0 if value is None else value

    @field_validator("params", mode="before")
    @classmethod
    def _null_str(cls, value: str | None) -> str:
        return "" if value is None else value


class RoomUpdate(RoomCreate):
    """Schema for updating a room. Full replace: omitted fields reset to zero."""


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RoomResponse(BaseModel):
    """Room returned by the API. ``guests`` is only set by the rooms listing."""

    id: int
    number: int
    params: str = ""
    beds: int = 0
    guests: list[GuestResponse] | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("params", mode="before")
    @classmethod
    def _null_params(cls, value: str | None) -> str:
        return "" if value is None else value

    @field_validator("beds", mode="before")
    @classmethod
    def _null_beds(cls, value: int | None) -> int:
        return 0 if value is None else value
