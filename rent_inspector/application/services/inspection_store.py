"""Inspection store — the single writer of persisted properties, records and rooms.

Every public mutation:
    1. waits for the write lock (one writer at a time),
    2. runs inside one transaction,
    3. reloads the canonical collections from the database,
    4. publishes them exactly once through the StorePublisher.

Failures never raise across this boundary; they come back as a failed
StoreResult and the unchanged collections are published again.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime, timezone
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from rent_inspector.application.interfaces import ImageStorage
from rent_inspector.application.services.store_publisher import StorePublisher
from rent_inspector.domain.entities import (
    Property,
    Record,
    RecordStage,
    Room,
    StoreSnapshot,
    reminder_due_date,
)
from rent_inspector.domain.exceptions import (
    EntityNotFoundError,
    ImageNotFoundError,
    InvalidDataError,
    NoRecordsToDeleteError,
    OperationFailedError,
    PropertyNotFoundError,
    RecordNotFoundError,
    RoomNotFoundError,
    StoreError,
    StoreInitializationError,
)
from rent_inspector.domain.results import StoreResult
from rent_inspector.infrastructure.database import Base, create_session_factory
from rent_inspector.infrastructure.database.models import SCHEMA_INFO_ID, SchemaInfoModel
from rent_inspector.infrastructure.database.repositories import (
    SQLAlchemyPropertyRepository,
    SQLAlchemyRecordRepository,
    SQLAlchemyRoomRepository,
)
from rent_inspector.infrastructure.logging.colored_logger import StoreLogger, StoreScope

T = TypeVar("T")

_UNSET = ...

CURRENT_SCHEMA_VERSION = 5

# Upgrade steps keyed by the version they lead to. All are no-ops today.
_SCHEMA_UPGRADES: dict[int, str] = {
    2: "room photos addressed by file-name token",
    3: "properties table",
    4: "record to property link",
    5: "record timestamps",
}


class InspectionStore:
    """Owns the database handle and serializes every write to it.

    Build one per process, ``await open()`` it before use and pass it to
    whoever needs it. Reads of the published collections go through
    ``properties`` / ``records``; ``get_*`` read fresh rows.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        publisher: StorePublisher | None = None,
        image_storage: ImageStorage | None = None,
        schema_version: int = CURRENT_SCHEMA_VERSION,
    ) -> None:
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._publisher = publisher or StorePublisher()
        self._image_storage = image_storage
        self._schema_version = schema_version
        self._write_lock = asyncio.Lock()
        self._available = False
        self._initialization_error: StoreInitializationError | None = None
        self._log = StoreLogger("InspectionStore")

    # ── Lifecycle ────────────────────────────────────────────────────

    @property
    def publisher(self) -> StorePublisher:
        return self._publisher

    @property
    def available(self) -> bool:
        return self._available

    @property
    def initialization_error(self) -> StoreInitializationError | None:
        return self._initialization_error

    async def open(self) -> StoreResult[None]:
        """Create tables, reconcile the schema version and publish the initial load.

        A failure here is permanent for this instance; there is no retry.
        """
        if self._available:
            return StoreResult.success()
        if self._initialization_error is not None:
            return StoreResult.failure(self._initialization_error)

        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            async with self._session_factory() as session:
                async with session.begin():
                    await self._reconcile_schema_version(session)
            snapshot = await self._load_snapshot()
        except (SQLAlchemyError, OSError, StoreInitializationError) as exc:
            error = (
                exc
                if isinstance(exc, StoreInitializationError)
                else StoreInitializationError(str(exc))
            )
            self._initialization_error = error
            self._log.failure(StoreScope.STORE, "Store initialization failed", error=exc)
            return StoreResult.failure(error)

        self._available = True
        self._publisher.publish(snapshot)
        self._log.success(StoreScope.STORE, "Store opened")
        self._log.stats(
            properties=len(snapshot.properties),
            records=len(snapshot.records),
            photos=sum(record.total_photos for record in snapshot.records),
        )
        return StoreResult.success()

    async def close(self) -> None:
        await self._engine.dispose()

    async def _reconcile_schema_version(self, session: AsyncSession) -> None:
        info = await session.get(SchemaInfoModel, SCHEMA_INFO_ID)
        if info is None:
            session.add(SchemaInfoModel(id=SCHEMA_INFO_ID, version=self._schema_version))
            return
        if info.version > self._schema_version:
            raise StoreInitializationError(
                f"database schema version {info.version} is newer than "
                f"supported version {self._schema_version}"
            )
        if info.version == self._schema_version:
            return
        for version in range(info.version + 1, self._schema_version + 1):
            self._log.detail(
                "Schema upgrade step",
                version=version,
                step=_SCHEMA_UPGRADES.get(version, "no-op"),
            )
        self._log.success(
            StoreScope.STORE,
            "Schema version bumped",
            old=info.version,
            new=self._schema_version,
        )
        info.version = self._schema_version
        info.updated_at = datetime.now(timezone.utc)

    # ── Published collections ────────────────────────────────────────

    @property
    def properties(self) -> list[Property]:
        return self._publisher.current.properties

    @property
    def records(self) -> list[Record]:
        return self._publisher.current.records

    @property
    def record_count(self) -> int:
        return len(self._publisher.current.records)

    def property_name_for(self, property_id: str | None) -> str | None:
        """Display name of a published property, or None if unknown."""
        if property_id is None:
            return None
        for prop in self._publisher.current.properties:
            if prop.id == property_id:
                return prop.display_name
        return None

    # ── Fresh reads ──────────────────────────────────────────────────

    async def get_property(self, property_id: str) -> Property | None:
        return await self._read(
            lambda session: SQLAlchemyPropertyRepository(session).get_by_id(property_id)
        )

    async def get_record(self, record_id: str) -> Record | None:
        return await self._read(
            lambda session: SQLAlchemyRecordRepository(session).get_by_id(record_id)
        )

    async def get_room(self, room_id: str) -> Room | None:
        return await self._read(
            lambda session: SQLAlchemyRoomRepository(session).get_by_id(room_id)
        )

    # ── Property operations ──────────────────────────────────────────

    async def create_property(self, name: str = "", address: str = "") -> StoreResult[Property]:
        prop = Property(name=name, address=address)

        async def work(session: AsyncSession) -> Property:
            return await SQLAlchemyPropertyRepository(session).create(prop)

        result = await self._mutate(StoreScope.PROPERTY, "create_property", work)
        if result.ok:
            self._log.success(StoreScope.PROPERTY, "Property created", name=result.value.display_name)
        return result

    async def delete_property(self, property_id: str) -> StoreResult[Property]:
        """Delete the property row and clear the link on its records.

        Records are never deleted with their property.
        """

        async def work(session: AsyncSession) -> tuple[Property, int]:
            properties = SQLAlchemyPropertyRepository(session)
            prop = await properties.get_by_id(property_id)
            if prop is None:
                raise PropertyNotFoundError(property_id)
            unlinked = await SQLAlchemyRecordRepository(session).unlink_property(property_id)
            await properties.delete(property_id)
            return prop, unlinked

        result = await self._mutate(StoreScope.PROPERTY, "delete_property", work)
        if not result.ok:
            return StoreResult.failure(result.error)
        prop, unlinked = result.value
        self._log.success(StoreScope.PROPERTY, "Property deleted", id=property_id, unlinked_records=unlinked)
        return StoreResult.success(prop)

    # ── Record operations ────────────────────────────────────────────

    async def create_record(self, record: Record) -> StoreResult[Record]:
        """Insert a record together with the rooms already attached to it."""
        if record.reminder_interval < 0:
            return await self._reject(
                StoreScope.RECORD,
                "create_record",
                InvalidDataError("reminder_interval", "must not be negative"),
            )
        to_save = record.detached()
        to_save.next_reminder_date = reminder_due_date(to_save.updated_at, to_save.reminder_interval)

        async def work(session: AsyncSession) -> Record:
            if to_save.property_id is not None:
                if not await SQLAlchemyPropertyRepository(session).exists(to_save.property_id):
                    raise PropertyNotFoundError(to_save.property_id)
            return await SQLAlchemyRecordRepository(session).create(to_save)

        result = await self._mutate(StoreScope.RECORD, "create_record", work)
        if result.ok:
            self._log.success(
                StoreScope.RECORD,
                "Record created",
                title=result.value.display_title,
                rooms=len(result.value.rooms),
            )
        return result

    async def update_record(
        self,
        record_id: str,
        *,
        title: str | None = None,
        stage: RecordStage | None = None,
        reminder_interval: int | None = None,
        property_id: str | None = _UNSET,  # type: ignore[assignment]
    ) -> StoreResult[Record]:
        """Partial update. Pass ``property_id=None`` to unlink; omit it to leave the link."""
        if reminder_interval is not None and reminder_interval < 0:
            return await self._reject(
                StoreScope.RECORD,
                "update_record",
                InvalidDataError("reminder_interval", "must not be negative"),
            )
        return await self._update_record(
            "update_record",
            record_id,
            title=title,
            stage=stage,
            reminder_interval=reminder_interval,
            property_id=property_id,
        )

    async def unlink_record(self, record_id: str) -> StoreResult[Record]:
        """Clear the record's property link without deleting anything."""
        return await self._update_record("unlink_record", record_id, property_id=None)

    async def _update_record(
        self,
        operation: str,
        record_id: str,
        *,
        title: str | None = None,
        stage: RecordStage | None = None,
        reminder_interval: int | None = None,
        property_id: str | None = _UNSET,  # type: ignore[assignment]
    ) -> StoreResult[Record]:
        async def work(session: AsyncSession) -> Record:
            records = SQLAlchemyRecordRepository(session)
            record = await records.get_by_id(record_id)
            if record is None:
                raise RecordNotFoundError(record_id)
            if property_id is not _UNSET and property_id is not None:
                if not await SQLAlchemyPropertyRepository(session).exists(property_id):
                    raise PropertyNotFoundError(property_id)
            record.update(
                title=title,
                stage=stage,
                reminder_interval=reminder_interval,
                property_id=property_id,
            )
            return await records.update(record)

        result = await self._mutate(StoreScope.RECORD, operation, work)
        if result.ok:
            self._log.success(StoreScope.RECORD, "Record updated", title=result.value.display_title)
        return result

    async def delete_record(self, record_id: str) -> StoreResult[Record]:
        """Delete a record and, first, every room it owns."""

        async def work(session: AsyncSession) -> Record:
            records = SQLAlchemyRecordRepository(session)
            record = await records.get_by_id(record_id)
            if record is None:
                raise RecordNotFoundError(record_id)
            await records.delete(record_id)
            return record

        result = await self._mutate(StoreScope.RECORD, "delete_record", work)
        if result.ok:
            self._log.success(StoreScope.RECORD, "Record deleted", id=record_id)
            await self._discard_photos(
                token for room in result.value.rooms for token in room.photo_paths
            )
        return result

    # ── Room operations ──────────────────────────────────────────────

    async def add_room(self, record_id: str, room: Room) -> StoreResult[Room]:
        to_save = room.detached()

        async def work(session: AsyncSession) -> Room:
            added = await SQLAlchemyRoomRepository(session).append_to_record(record_id, to_save)
            if added is None:
                raise RecordNotFoundError(record_id)
            return added

        result = await self._mutate(StoreScope.ROOM, "add_room", work)
        if result.ok:
            self._log.success(StoreScope.ROOM, "Room added to record", room=result.value.display_name)
        return result

    async def update_room(
        self,
        room_id: str,
        *,
        custom_name: str | None = None,
        comment: str | None = None,
    ) -> StoreResult[Room]:
        async def work(session: AsyncSession) -> Room:
            rooms = SQLAlchemyRoomRepository(session)
            room = await rooms.get_by_id(room_id)
            if room is None:
                raise RoomNotFoundError(room_id)
            if custom_name is not None:
                room.custom_name = custom_name
            if comment is not None:
                room.comment = comment
            return await rooms.update(room)

        result = await self._mutate(StoreScope.ROOM, "update_room", work)
        if result.ok:
            self._log.success(StoreScope.ROOM, "Room updated", room=result.value.display_name)
        return result

    async def delete_room(self, room_id: str, record_id: str) -> StoreResult[Room]:
        """Remove a room from its record's list, then delete the room row."""

        async def work(session: AsyncSession) -> Room:
            if await SQLAlchemyRecordRepository(session).get_by_id(record_id) is None:
                raise RecordNotFoundError(record_id)
            rooms = SQLAlchemyRoomRepository(session)
            room = await rooms.get_by_id(room_id)
            if room is None or await rooms.get_record_id(room_id) != record_id:
                raise RoomNotFoundError(room_id)
            await rooms.remove_from_record(record_id, room_id)
            return room

        result = await self._mutate(StoreScope.ROOM, "delete_room", work)
        if result.ok:
            self._log.success(StoreScope.ROOM, "Room deleted", id=room_id)
            await self._discard_photos(result.value.photo_paths)
        return result

    # ── Photo operations ─────────────────────────────────────────────

    async def add_photo(self, room_id: str, photo_ref: str) -> StoreResult[Room]:
        """Append a photo file-name token to a room."""
        if not photo_ref or not photo_ref.strip():
            return await self._reject(
                StoreScope.PHOTO, "add_photo", InvalidDataError("photo_ref", "must not be empty")
            )

        async def work(session: AsyncSession) -> Room:
            rooms = SQLAlchemyRoomRepository(session)
            room = await rooms.get_by_id(room_id)
            if room is None:
                raise RoomNotFoundError(room_id)
            room.photo_paths.append(photo_ref)
            return await rooms.update(room)

        result = await self._mutate(StoreScope.PHOTO, "add_photo", work)
        if result.ok:
            self._log.success(StoreScope.PHOTO, "Photo added to room", token=photo_ref)
        return result

    async def remove_photo(self, room_id: str, index: int) -> StoreResult[Room]:
        """Remove the photo at ``index``; an out-of-range index changes nothing."""

        async def work(session: AsyncSession) -> tuple[Room, str | None]:
            rooms = SQLAlchemyRoomRepository(session)
            room = await rooms.get_by_id(room_id)
            if room is None:
                raise RoomNotFoundError(room_id)
            if not 0 <= index < len(room.photo_paths):
                return room, None
            removed = room.photo_paths.pop(index)
            return await rooms.update(room), removed

        result = await self._mutate(StoreScope.PHOTO, "remove_photo", work)
        if not result.ok:
            return StoreResult.failure(result.error)
        room, removed = result.value
        if removed is None:
            self._log.not_found(
                StoreScope.PHOTO,
                "Photo index out of range, nothing removed",
                index=index,
                photos=len(room.photo_paths),
            )
        else:
            self._log.success(StoreScope.PHOTO, "Photo removed from room", token=removed)
            await self._discard_photos([removed])
        return StoreResult.success(room)

    # ── Bulk ─────────────────────────────────────────────────────────

    async def clear_all(self) -> StoreResult[None]:
        """Delete every property, record and room in one transaction."""

        async def work(session: AsyncSession) -> list[str]:
            properties = SQLAlchemyPropertyRepository(session)
            records = SQLAlchemyRecordRepository(session)
            existing = await records.get_all()
            if not existing and not await properties.get_all():
                raise NoRecordsToDeleteError()
            tokens = [token for record in existing for room in record.rooms for token in room.photo_paths]
            deleted_records = await records.delete_all()
            deleted_properties = await properties.delete_all()
            self._log.detail(
                "Wiped tables",
                records=deleted_records,
                properties=deleted_properties,
            )
            return tokens

        result = await self._mutate(StoreScope.STORE, "clear_all", work)
        if not result.ok:
            return StoreResult.failure(result.error)
        self._log.success(StoreScope.STORE, "All data cleared")
        await self._discard_photos(result.value)
        return StoreResult.success()

    # ── Internals ────────────────────────────────────────────────────

    async def _mutate(
        self,
        scope: tuple[str, str, str],
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
    ) -> StoreResult[T]:
        async with self._write_lock:
            if not self._available:
                error = self._initialization_error or StoreInitializationError(
                    "store has not been opened"
                )
                self._log.failure(scope, f"{operation} skipped, store unavailable", error=error)
                self._publisher.publish(StoreSnapshot())
                return StoreResult.failure(error)

            result = await self._execute(scope, operation, work)
            await self._reload()
            return result

    async def _execute(
        self,
        scope: tuple[str, str, str],
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
    ) -> StoreResult[T]:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    value = await work(session)
        except (EntityNotFoundError, NoRecordsToDeleteError) as exc:
            self._log.not_found(scope, f"{operation}: {exc}")
            return StoreResult.failure(exc)
        except StoreError as exc:
            self._log.failure(scope, f"{operation} rejected", error=exc)
            return StoreResult.failure(exc)
        except SQLAlchemyError as exc:
            self._log.failure(scope, f"{operation} rolled back", error=exc)
            return StoreResult.failure(OperationFailedError(operation, str(exc)))
        return StoreResult.success(value)

    async def _reject(
        self, scope: tuple[str, str, str], operation: str, error: StoreError
    ) -> StoreResult:
        """Refuse malformed input without opening a transaction."""
        async with self._write_lock:
            self._log.failure(scope, f"{operation} rejected", error=error)
            if self._available:
                self._publisher.republish()
            else:
                self._publisher.publish(StoreSnapshot())
        return StoreResult.failure(error)

    async def _reload(self) -> None:
        try:
            snapshot = await self._load_snapshot()
        except SQLAlchemyError as exc:
            self._log.failure(StoreScope.PUBLISH, "Reload failed, republishing last snapshot", error=exc)
            self._publisher.republish()
            return
        self._publisher.publish(snapshot)
        self._log.detail(
            "Published snapshot",
            properties=len(snapshot.properties),
            records=len(snapshot.records),
        )

    async def _load_snapshot(self) -> StoreSnapshot:
        async with self._session_factory() as session:
            properties = await SQLAlchemyPropertyRepository(session).get_all()
            records = await SQLAlchemyRecordRepository(session).get_all()
        return StoreSnapshot(properties=properties, records=records)

    async def _read(self, fetch: Callable[[AsyncSession], Awaitable[T]]) -> T | None:
        if not self._available:
            return None
        try:
            async with self._session_factory() as session:
                return await fetch(session)
        except SQLAlchemyError as exc:
            self._log.failure(StoreScope.STORE, "Read failed", error=exc)
            return None

    async def _discard_photos(self, tokens: Iterable[str]) -> None:
        """Remove photo files no longer referenced by any committed room."""
        tokens = list(tokens)
        if self._image_storage is None or not tokens:
            return
        removed = 0
        for token in tokens:
            try:
                if await self._image_storage.delete_image(token):
                    removed += 1
            except (OSError, ImageNotFoundError) as exc:
                self._log.failure(StoreScope.PHOTO, f"Could not delete photo {token}", error=exc)
        self._log.detail("Deleted orphan photos from disk", count=removed)
