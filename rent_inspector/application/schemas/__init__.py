from .room import RoomCreate, RoomUpdate, RoomResponse
from .record import (
    RecordCreate,
    RecordUpdate,
    RecordResponse,
    ReminderUpdate,
    RoomPlanSchema,
)
from .property import PropertyCreate, PropertyResponse, DisabledStagesResponse
from .profile import ProfileResponse, ProfileUpdate

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
    "RecordCreate",
    "RecordUpdate",
    "RecordResponse",
    "ReminderUpdate",
    "RoomPlanSchema",
    "PropertyCreate",
    "PropertyResponse",
    "DisabledStagesResponse",
    "ProfileResponse",
    "ProfileUpdate",
]
