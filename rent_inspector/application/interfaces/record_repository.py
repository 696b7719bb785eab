"""Abstract repository interface (port) for Record persistence."""

from abc import ABC, abstractmethod

from rent_inspector.domain.entities import Record


class RecordRepository(ABC):
    """Port for record persistence — a record is saved with its owned rooms."""

    @abstractmethod
    async def get_by_id(self, record_id: str) -> Record | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Record]:
        """Retrieve every record, newest first."""
        ...

    @abstractmethod
    async def create(self, record: Record) -> Record:
        """Persist a record and all of its rooms as one object graph."""
        ...

    @abstractmethod
    async def update(self, record: Record) -> Record:
        """Write back the scalar fields of an existing record."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete the record's rooms, then the record. False if not found."""
        ...

    @abstractmethod
    async def unlink_property(self, property_id: str) -> int:
        """Clear the property link on every record pointing at it."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        ...
