"""Domain entity for an inspection record and its lifecycle stage."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from uuid import uuid4

from .room import Room

_UNSET = ...


class RecordStage(str, Enum):
    """Point in the tenancy lifecycle an inspection documents."""

    MOVE_IN = "move_in"
    LIVING = "living"
    MOVE_OUT = "move_out"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, raw: str) -> "RecordStage":
        try:
            return cls(raw)
        except ValueError:
            return cls.MOVE_IN


def reminder_due_date(anchor: datetime, interval_days: int) -> datetime | None:
    """Next reminder instant for an interval; None when reminders are off."""
    if interval_days > 0:
        return anchor + timedelta(days=interval_days)
    return None


@dataclass
class Record:
    """Core domain entity: one inspection report with its owned rooms.

    ``next_reminder_date`` is derived from ``updated_at`` and
    ``reminder_interval`` and is kept in step by ``update``.
    """

    title: str = ""
    stage: RecordStage = RecordStage.MOVE_IN
    rooms: list[Room] = field(default_factory=list)
    reminder_interval: int = 0
    property_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None
    next_reminder_date: datetime | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at
        self.next_reminder_date = reminder_due_date(self.updated_at, self.reminder_interval)

    @property
    def display_title(self) -> str:
        if self.title:
            return self.title
        return f"Record {self.created_at:%b} {self.created_at.day}, {self.created_at:%Y}"

    @property
    def total_photos(self) -> int:
        return sum(room.photo_count for room in self.rooms)

    def update(
        self,
        title: str | None = None,
        stage: RecordStage | None = None,
        reminder_interval: int | None = None,
        property_id: str | None = _UNSET,  # type: ignore[assignment]
        now: datetime | None = None,
    ) -> None:
        """Apply a partial update and refresh updated_at / next_reminder_date."""
        if title is not None:
            self.title = title
        if stage is not None:
            self.stage = stage
        if reminder_interval is not None:
            self.reminder_interval = reminder_interval
        if property_id is not _UNSET:
            self.property_id = property_id
        self.updated_at = now or datetime.now(timezone.utc)
        self.next_reminder_date = reminder_due_date(self.updated_at, self.reminder_interval)

    def detached(self) -> "Record":
        copy = Record(
            title=self.title,
            stage=self.stage,
            rooms=[room.detached() for room in self.rooms],
            reminder_interval=self.reminder_interval,
            property_id=self.property_id,
            id=self.id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        copy.next_reminder_date = self.next_reminder_date
        return copy
