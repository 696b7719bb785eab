"""In-process reminder scheduler keeping one pending reminder per record."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from rent_inspector.application.interfaces import ReminderScheduler, reminder_identifier

logger = logging.getLogger(__name__)


@dataclass
class PendingReminder:
    """A repeating reminder as installed for one record."""

    identifier: str
    record_id: str
    title: str
    body: str
    days_interval: int
    scheduled_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def next_fire_date(self) -> datetime:
        return self.scheduled_at + timedelta(days=self.days_interval)


class LocalReminderScheduler(ReminderScheduler):
    """Keeps reminders in memory, keyed by their deterministic identifier.

    Re-scheduling a record replaces its previous reminder.
    """

    def __init__(self) -> None:
        self._pending: dict[str, PendingReminder] = {}

    async def schedule_reminder(
        self, record_id: str, title: str, body: str, days_interval: int
    ) -> str:
        if days_interval <= 0:
            raise ValueError("days_interval must be positive")
        identifier = reminder_identifier(record_id)
        self._pending[identifier] = PendingReminder(
            identifier=identifier,
            record_id=record_id,
            title=title,
            body=body,
            days_interval=days_interval,
        )
        logger.info("Scheduled reminder %s every %d day(s)", identifier, days_interval)
        return identifier

    async def cancel_reminder(self, record_id: str) -> bool:
        identifier = reminder_identifier(record_id)
        removed = self._pending.pop(identifier, None)
        if removed is not None:
            logger.info("Cancelled reminder %s", identifier)
        return removed is not None

    def pending_identifiers(self) -> list[str]:
        return sorted(self._pending)

    def get_pending(self, record_id: str) -> PendingReminder | None:
        return self._pending.get(reminder_identifier(record_id))
