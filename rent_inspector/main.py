"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rent_inspector.config import get_settings
from rent_inspector.application.services import InspectionStore, QueryService, StorePublisher
from rent_inspector.infrastructure.export.pdf_record_exporter import PdfRecordExporter
from rent_inspector.infrastructure.database.session import create_store_engine, ensure_sqlite_directory
from rent_inspector.infrastructure.logging.log_config import setup_logging
from rent_inspector.infrastructure.notifications.local_reminder_scheduler import LocalReminderScheduler
from rent_inspector.infrastructure.storage.local_image_storage import LocalImageStorage
from rent_inspector.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the store once, wire collaborators, dispose on shutdown."""
    settings = get_settings()
    setup_logging()

    # 1. Photo directory and database file location
    image_storage = LocalImageStorage(settings.photo_dir)
    ensure_sqlite_directory(settings.database_url)

    # 2. One engine, one store for the whole process
    engine = create_store_engine(settings.database_url)
    store = InspectionStore(
        engine,
        publisher=StorePublisher(),
        image_storage=image_storage,
        schema_version=settings.schema_version,
    )
    result = await store.open()
    if not result.ok:
        # The API still starts; store operations report 503 until restart
        logger.error("Inspection store unavailable: %s", result.error)

    app.state.store = store
    app.state.query_service = QueryService()
    app.state.image_storage = image_storage
    app.state.reminder_scheduler = LocalReminderScheduler()
    app.state.record_exporter = PdfRecordExporter(settings.export_dir)
    app.state.user_name = settings.default_user_name

    yield

    # Shutdown
    await store.close()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rent_inspector.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
