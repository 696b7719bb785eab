from .property_repository import PropertyRepository
from .record_repository import RecordRepository
from .room_repository import RoomRepository
from .image_storage import ImageStorage
from .reminder_scheduler import ReminderScheduler, reminder_identifier
from .record_exporter import RecordExporter

__all__ = [
    "PropertyRepository",
    "RecordRepository",
    "RoomRepository",
    "ImageStorage",
    "ReminderScheduler",
    "reminder_identifier",
    "RecordExporter",
]
