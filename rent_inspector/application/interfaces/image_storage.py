"""Port for the photo file collaborator."""

from abc import ABC, abstractmethod


class ImageStorage(ABC):
    """Stores raw image bytes and hands back a store-referenceable token."""

    @abstractmethod
    async def save_image(self, data: bytes) -> str:
        """Persist image bytes and return a stable file-name token."""
        ...

    @abstractmethod
    async def load_image(self, token: str) -> bytes:
        """Return the bytes behind a token; raises ImageNotFoundError."""
        ...

    @abstractmethod
    async def delete_image(self, token: str) -> bool:
        """Remove the file behind a token. Returns False if it was absent."""
        ...
