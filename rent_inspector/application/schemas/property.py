"""Pydantic DTOs (Data Transfer Objects) for rental properties."""

from datetime import datetime

from pydantic import BaseModel, Field

from rent_inspector.domain.entities import RecordStage

from .record import RecordResponse


class PropertyCreate(BaseModel):
    """Schema for creating a property. Both fields may be blank."""

    name: str = Field("", max_length=100, examples=["Riverside flat"])
    address: str = Field("", max_length=200, examples=["12 Main St, Apt 4"])


class PropertyResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    address: str
    display_name: str
    record_count: int
    records: list[RecordResponse]
    created_at: datetime

    model_config = {"from_attributes": True}


class DisabledStagesResponse(BaseModel):
    property_id: str
    disabled_stages: list[RecordStage]
