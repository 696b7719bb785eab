"""Shared fixtures: an application wired to a temporary SQLite store."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from rent_inspector.application.services import InspectionStore, QueryService
from rent_inspector.infrastructure.database import create_store_engine
from rent_inspector.infrastructure.export.pdf_record_exporter import PdfRecordExporter
from rent_inspector.infrastructure.notifications.local_reminder_scheduler import (
    LocalReminderScheduler,
)
from rent_inspector.infrastructure.storage.local_image_storage import LocalImageStorage
from rent_inspector.main import create_app


@pytest_asyncio.fixture
async def app(tmp_path):
    """FastAPI app with app.state populated the way the lifespan does it."""
    app = create_app()
    images = LocalImageStorage(tmp_path / "photos")
    store = InspectionStore(
        create_store_engine(f"sqlite:///{tmp_path / 'api.db'}"),
        image_storage=images,
    )
    await store.open()

    app.state.store = store
    app.state.query_service = QueryService()
    app.state.image_storage = images
    app.state.reminder_scheduler = LocalReminderScheduler()
    app.state.record_exporter = PdfRecordExporter(tmp_path / "exports")
    app.state.user_name = "User"
    yield app
    await store.close()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
