from .base import Base
from .session import (
    create_session_factory,
    create_store_engine,
    ensure_sqlite_directory,
    get_async_url,
)
from .models import PropertyModel, RecordModel, RoomModel, SchemaInfoModel

__all__ = [
    "Base",
    "create_session_factory",
    "create_store_engine",
    "ensure_sqlite_directory",
    "get_async_url",
    "PropertyModel",
    "RecordModel",
    "RoomModel",
    "SchemaInfoModel",
]
