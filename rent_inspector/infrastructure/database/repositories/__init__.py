from .property_repository import SQLAlchemyPropertyRepository
from .record_repository import SQLAlchemyRecordRepository
from .room_repository import SQLAlchemyRoomRepository

__all__ = [
    "SQLAlchemyPropertyRepository",
    "SQLAlchemyRecordRepository",
    "SQLAlchemyRoomRepository",
]
