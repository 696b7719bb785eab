"""Pydantic DTOs for the user profile."""

from pydantic import BaseModel


class ProfileUpdate(BaseModel):
    user_name: str


class ProfileResponse(BaseModel):
    """User name plus the counters shown next to it."""

    user_name: str
    record_count: int
    property_count: int
    photo_count: int
