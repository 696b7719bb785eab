"""Application service (use case) for exporting a record as a report document."""

import logging
from pathlib import Path

from rent_inspector.application.interfaces import ImageStorage, RecordExporter
from rent_inspector.application.services.inspection_store import InspectionStore
from rent_inspector.domain.exceptions import (
    ImageNotFoundError,
    OperationFailedError,
    RecordNotFoundError,
    StoreInitializationError,
)
from rent_inspector.domain.results import StoreResult

logger = logging.getLogger(__name__)


class RecordExportService:
    """Loads a record and its photo bytes, then hands both to the exporter."""

    def __init__(
        self,
        store: InspectionStore,
        image_storage: ImageStorage,
        exporter: RecordExporter,
    ):
        self._store = store
        self._image_storage = image_storage
        self._exporter = exporter

    async def export_record(self, record_id: str) -> StoreResult[Path]:
        if not self._store.available:
            return StoreResult.failure(
                self._store.initialization_error
                or StoreInitializationError("store has not been opened")
            )
        record = await self._store.get_record(record_id)
        if record is None:
            return StoreResult.failure(RecordNotFoundError(record_id))

        photos: dict[str, bytes] = {}
        for room in record.rooms:
            for token in room.photo_paths:
                try:
                    photos[token] = await self._image_storage.load_image(token)
                except ImageNotFoundError:
                    logger.warning("Photo %s is missing on disk, exporting without it", token)

        try:
            path = await self._exporter.export_record(record, photos)
        except OSError as exc:
            logger.error("Export of record %s failed: %s", record_id, exc)
            return StoreResult.failure(OperationFailedError("export_record", str(exc)))
        return StoreResult.success(path)
