"""Abstract repository interface (port) for Property persistence."""

from abc import ABC, abstractmethod

from rent_inspector.domain.entities import Property


class PropertyRepository(ABC):
    """Port for property persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, property_id: str) -> Property | None:
        """Retrieve a property, with its linked records, by id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Property]:
        """Retrieve every property, newest first."""
        ...

    @abstractmethod
    async def exists(self, property_id: str) -> bool:
        ...

    @abstractmethod
    async def create(self, prop: Property) -> Property:
        """Persist a new property and return it."""
        ...

    @abstractmethod
    async def delete(self, property_id: str) -> bool:
        """Delete the property row only. Returns False if not found."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        ...
