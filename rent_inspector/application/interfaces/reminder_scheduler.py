"""Port for the repeating-reminder collaborator."""

from abc import ABC, abstractmethod


def reminder_identifier(record_id: str) -> str:
    """Deterministic notification identifier for a record."""
    return f"report_reminder_{record_id}"


class ReminderScheduler(ABC):
    """(Re)installs and cancels one repeating reminder per record."""

    @abstractmethod
    async def schedule_reminder(
        self, record_id: str, title: str, body: str, days_interval: int
    ) -> str:
        """Install or replace the record's reminder; returns its identifier."""
        ...

    @abstractmethod
    async def cancel_reminder(self, record_id: str) -> bool:
        """Cancel the record's reminder. Returns False if none was pending."""
        ...
