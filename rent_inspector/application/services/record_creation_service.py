"""Application service (use case) for creating records and managing their reminders."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from rent_inspector.application.interfaces import ImageStorage, ReminderScheduler
from rent_inspector.application.services.inspection_store import InspectionStore
from rent_inspector.domain.entities import Property, Record, RecordStage, Room, RoomType
from rent_inspector.domain.exceptions import InvalidDataError, OperationFailedError
from rent_inspector.domain.results import StoreResult

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Reminder"

# Stages a property can hold at most once
_SINGLE_STAGES = (RecordStage.MOVE_IN, RecordStage.MOVE_OUT)


@dataclass
class RoomPlan:
    """Answers from the onboarding wizard."""

    room_count: int = 1
    has_balcony: bool = False
    has_loggia: bool = False
    wardrobe_count: int = 0
    storage_count: int = 0
    other_count: int = 0


@dataclass
class RoomDraft:
    room_type: RoomType
    custom_name: str
    comment: str = ""
    photos: list[bytes] = field(default_factory=list)


@dataclass
class RecordDraft:
    """A record being filled in, before any photo has been written to disk."""

    title: str = ""
    stage: RecordStage = RecordStage.MOVE_IN
    reminder_interval: int = 0
    property_id: str | None = None
    rooms: list[RoomDraft] = field(default_factory=list)


def _numbered(room_type: RoomType, count: int) -> list[RoomDraft]:
    return [
        RoomDraft(room_type=room_type, custom_name=f"{room_type.display_name} {i}")
        for i in range(1, count + 1)
    ]


def generate_rooms(plan: RoomPlan) -> list[RoomDraft]:
    """Initial room list for a plan.

    Order: bedrooms, kitchen, first bathroom, balcony, loggia, then the
    numbered wardrobes, storages and other rooms.
    """
    if plan.room_count < 1:
        raise ValueError("room_count must be at least 1")

    rooms = _numbered(RoomType.BEDROOM, plan.room_count)
    rooms.append(RoomDraft(room_type=RoomType.KITCHEN, custom_name=RoomType.KITCHEN.display_name))
    rooms.extend(_numbered(RoomType.BATHROOM, 1))
    if plan.has_balcony:
        rooms.extend(_numbered(RoomType.BALCONY, 1))
    if plan.has_loggia:
        rooms.extend(_numbered(RoomType.LOGGIA, 1))
    rooms.extend(_numbered(RoomType.WARDROBE, plan.wardrobe_count))
    rooms.extend(_numbered(RoomType.STORAGE, plan.storage_count))
    rooms.extend(_numbered(RoomType.OTHER, plan.other_count))
    return rooms


def next_bathroom_name(room_types: Iterable[RoomType]) -> str:
    number = sum(1 for room_type in room_types if room_type is RoomType.BATHROOM) + 1
    return f"{RoomType.BATHROOM.display_name} {number}"


def add_bathroom(rooms: list[RoomDraft]) -> RoomDraft:
    """Append the next numbered bathroom and return it."""
    bathroom = RoomDraft(
        room_type=RoomType.BATHROOM,
        custom_name=next_bathroom_name(room.room_type for room in rooms),
    )
    rooms.append(bathroom)
    return bathroom


def can_delete_room(room_types: list[RoomType], index: int) -> bool:
    """Bedrooms, the kitchen and the first bathroom are fixed."""
    if not 0 <= index < len(room_types):
        return False
    room_type = room_types[index]
    if room_type in (RoomType.BEDROOM, RoomType.KITCHEN):
        return False
    if room_type is RoomType.BATHROOM:
        return index != room_types.index(RoomType.BATHROOM)
    return True


def disabled_stages(prop: Property | None) -> list[RecordStage]:
    """Stages that cannot be chosen for a new record of ``prop``."""
    if prop is None:
        return []
    return [stage for stage in _SINGLE_STAGES if prop.has_record_with_stage(stage)]


def reminder_body(record: Record) -> str:
    return f"Time for your next visit: {record.display_title}"


class RecordCreationService:
    """Orchestrates photo files, the store and the reminder scheduler for a record."""

    def __init__(
        self,
        store: InspectionStore,
        image_storage: ImageStorage,
        reminder_scheduler: ReminderScheduler,
    ):
        self._store = store
        self._image_storage = image_storage
        self._reminder_scheduler = reminder_scheduler

    async def create_record(self, draft: RecordDraft) -> StoreResult[Record]:
        if draft.property_id is not None:
            prop = await self._store.get_property(draft.property_id)
            if draft.stage in disabled_stages(prop):
                return StoreResult.failure(
                    InvalidDataError(
                        "stage",
                        f"property already has a {draft.stage.display_name} record",
                    )
                )

        saved_tokens: list[str] = []
        rooms: list[Room] = []
        try:
            for room_draft in draft.rooms:
                tokens = []
                for data in room_draft.photos:
                    token = await self._image_storage.save_image(data)
                    tokens.append(token)
                    saved_tokens.append(token)
                rooms.append(
                    Room(
                        room_type=room_draft.room_type,
                        custom_name=room_draft.custom_name,
                        comment=room_draft.comment,
                        photo_paths=tokens,
                    )
                )
        except OSError as exc:
            await self._discard(saved_tokens)
            logger.error("Saving photos failed after %d file(s): %s", len(saved_tokens), exc)
            return StoreResult.failure(OperationFailedError("create_record", str(exc)))

        record = Record(
            title=draft.title,
            stage=draft.stage,
            rooms=rooms,
            reminder_interval=draft.reminder_interval,
            property_id=draft.property_id,
        )
        result = await self._store.create_record(record)
        if not result.ok:
            await self._discard(saved_tokens)
            logger.warning(
                "Record creation failed, removed %d saved photo(s): %s",
                len(saved_tokens),
                result.error,
            )
            return result

        created = result.value
        if created.reminder_interval > 0:
            await self._schedule(created)
        return result

    async def update_reminder(self, record_id: str, days: int) -> StoreResult[Record]:
        """Change the interval and reschedule the reminder, or cancel it for 0."""
        result = await self._store.update_record(record_id, reminder_interval=days)
        if not result.ok:
            return result
        if days > 0:
            await self._schedule(result.value)
        else:
            await self._reminder_scheduler.cancel_reminder(record_id)
        return result

    async def delete_record(self, record_id: str) -> StoreResult[Record]:
        result = await self._store.delete_record(record_id)
        if result.ok:
            await self._reminder_scheduler.cancel_reminder(record_id)
        return result

    async def clear_all(self) -> StoreResult[None]:
        """Wipe the store and drop the reminders of every record it held."""
        record_ids = [record.id for record in self._store.records]
        result = await self._store.clear_all()
        if result.ok:
            for record_id in record_ids:
                await self._reminder_scheduler.cancel_reminder(record_id)
        return result

    async def _discard(self, tokens: list[str]) -> None:
        for token in tokens:
            try:
                await self._image_storage.delete_image(token)
            except OSError as exc:
                logger.warning("Could not remove photo %s: %s", token, exc)

    async def _schedule(self, record: Record) -> None:
        await self._reminder_scheduler.schedule_reminder(
            record.id,
            REMINDER_TITLE,
            reminder_body(record),
            record.reminder_interval,
        )
