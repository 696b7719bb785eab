"""Pydantic DTOs (Data Transfer Objects) for rooms and their photos."""

from datetime import datetime

from pydantic import BaseModel, Field

from rent_inspector.domain.entities import RoomType


class RoomCreate(BaseModel):
    """Schema for adding a room to an existing record."""

    room_type: RoomType = Field(RoomType.OTHER, examples=["balcony"])
    custom_name: str = Field("", examples=["Balcony 2"])
    comment: str = ""


class RoomUpdate(BaseModel):
    """Schema for editing a room — all fields optional."""

    custom_name: str | None = None
    comment: str | None = None


class RoomResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    room_type: RoomType
    custom_name: str
    display_name: str
    comment: str
    photo_paths: list[str]
    photo_count: int
    created_at: datetime

    model_config = {"from_attributes": True}
