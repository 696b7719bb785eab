from .room import Room, RoomType
from .record import Record, RecordStage, reminder_due_date
from .property import Property, DEFAULT_PROPERTY_NAME
from .query import DateFilter, SortOrder
from .snapshot import StoreSnapshot

__all__ = [
    "Room",
    "RoomType",
    "Record",
    "RecordStage",
    "reminder_due_date",
    "Property",
    "DEFAULT_PROPERTY_NAME",
    "DateFilter",
    "SortOrder",
    "StoreSnapshot",
]
