from .store_publisher import StorePublisher, Subscription
from .query_service import QueryService
from .inspection_store import InspectionStore, CURRENT_SCHEMA_VERSION
from .record_export_service import RecordExportService
from .record_creation_service import (
    RecordCreationService,
    RecordDraft,
    RoomDraft,
    RoomPlan,
    add_bathroom,
    can_delete_room,
    disabled_stages,
    generate_rooms,
)

__all__ = [
    "StorePublisher",
    "Subscription",
    "QueryService",
    "InspectionStore",
    "CURRENT_SCHEMA_VERSION",
    "RecordCreationService",
    "RecordExportService",
    "RecordDraft",
    "RoomDraft",
    "RoomPlan",
    "add_bathroom",
    "can_delete_room",
    "disabled_stages",
    "generate_rooms",
]
