"""Pydantic DTOs (Data Transfer Objects) for inspection records."""

from datetime import datetime

from pydantic import BaseModel, Field

from rent_inspector.domain.entities import RecordStage

from .room import RoomCreate, RoomResponse


class RoomPlanSchema(BaseModel):
    """Onboarding answers used to generate the initial rooms."""

    room_count: int = Field(1, ge=1, le=10)
    has_balcony: bool = False
    has_loggia: bool = False
    wardrobe_count: int = Field(0, ge=0, le=10)
    storage_count: int = Field(0, ge=0, le=10)
    other_count: int = Field(0, ge=0, le=10)


class RecordCreate(BaseModel):
    """Schema for creating a record.

    Rooms come either from ``rooms`` or, when that is omitted, from ``plan``
    (default: a one-room plan).
    """

    title: str = Field("", examples=["Flat 12, move-in"])
    stage: RecordStage = RecordStage.MOVE_IN
    reminder_interval: int = Field(0, ge=0)
    property_id: str | None = Field(None, max_length=36)
    plan: RoomPlanSchema | None = None
    rooms: list[RoomCreate] | None = None


class RecordUpdate(BaseModel):
    """Schema for a partial record update.

    Sending ``"property_id": null`` unlinks the record; leaving the key out
    keeps the current link.
    """

    title: str | None = None
    stage: RecordStage | None = None
    property_id: str | None = None


class ReminderUpdate(BaseModel):
    days: int = Field(..., ge=0, examples=[30])


class RecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    display_title: str
    stage: RecordStage
    rooms: list[RoomResponse]
    reminder_interval: int
    next_reminder_date: datetime | None
    property_id: str | None
    total_photos: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
