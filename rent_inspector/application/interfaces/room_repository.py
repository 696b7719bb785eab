"""Abstract repository interface (port) for Room persistence."""

from abc import ABC, abstractmethod

from rent_inspector.domain.entities import Room


class RoomRepository(ABC):
    """Port for room persistence. Rooms always belong to one record."""

    @abstractmethod
    async def get_by_id(self, room_id: str) -> Room | None:
        ...

    @abstractmethod
    async def get_record_id(self, room_id: str) -> str | None:
        """Return the id of the record owning the room, or None."""
        ...

    @abstractmethod
    async def append_to_record(self, record_id: str, room: Room) -> Room | None:
        """Append a room to the end of a record's room list."""
        ...

    @abstractmethod
    async def update(self, room: Room) -> Room:
        """Write back name, comment and photo references."""
        ...

    @abstractmethod
    async def remove_from_record(self, record_id: str, room_id: str) -> bool:
        """Detach the room from its record's list, then delete the row."""
        ...
