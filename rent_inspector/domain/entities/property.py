"""Domain entity for a rental property."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from .record import Record, RecordStage

DEFAULT_PROPERTY_NAME = "New Property"


@dataclass
class Property:
    """A rental property and the records currently linked to it.

    Records are associated by their ``property_id``; deleting a property
    never deletes its records.
    """

    name: str = ""
    address: str = ""
    records: list[Record] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def display_name(self) -> str:
        return self.name or self.address or DEFAULT_PROPERTY_NAME

    @property
    def record_count(self) -> int:
        return len(self.records)

    def has_record_with_stage(self, stage: RecordStage) -> bool:
        return any(record.stage == stage for record in self.records)

    def detached(self) -> "Property":
        return Property(
            name=self.name,
            address=self.address,
            records=[record.detached() for record in self.records],
            id=self.id,
            created_at=self.created_at,
        )
