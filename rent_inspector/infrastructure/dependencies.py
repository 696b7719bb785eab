"""FastAPI dependency injection — hands out the process-wide collaborators from app.state."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from rent_inspector.application.interfaces import ImageStorage, RecordExporter, ReminderScheduler
from rent_inspector.application.services import (
    InspectionStore,
    QueryService,
    RecordCreationService,
    RecordExportService,
)


def get_store(request: Request) -> InspectionStore:
    """The single InspectionStore built during application startup."""
    return request.app.state.store


def get_query_service(request: Request) -> QueryService:
    return request.app.state.query_service


def get_image_storage(request: Request) -> ImageStorage:
    return request.app.state.image_storage


def get_reminder_scheduler(request: Request) -> ReminderScheduler:
    return request.app.state.reminder_scheduler


def get_record_exporter(request: Request) -> RecordExporter:
    return request.app.state.record_exporter


async def get_record_creation_service(
    store: InspectionStore = Depends(get_store),
    image_storage: ImageStorage = Depends(get_image_storage),
    reminder_scheduler: ReminderScheduler = Depends(get_reminder_scheduler),
) -> AsyncGenerator[RecordCreationService, None]:
    """Provides a RecordCreationService wired to the shared store and collaborators."""
    yield RecordCreationService(store, image_storage, reminder_scheduler)


async def get_record_export_service(
    store: InspectionStore = Depends(get_store),
    image_storage: ImageStorage = Depends(get_image_storage),
    exporter: RecordExporter = Depends(get_record_exporter),
) -> AsyncGenerator[RecordExportService, None]:
    yield RecordExportService(store, image_storage, exporter)
