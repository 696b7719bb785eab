from .property import PropertyModel
from .record import RecordModel
from .room import RoomModel
from .schema_info import SchemaInfoModel, SCHEMA_INFO_ID

__all__ = [
    "PropertyModel",
    "RecordModel",
    "RoomModel",
    "SchemaInfoModel",
    "SCHEMA_INFO_ID",
]
