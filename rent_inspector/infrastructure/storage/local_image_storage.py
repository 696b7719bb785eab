"""Local filesystem storage for room photos.

Storage layout:
    <photo_dir>/<uuid4>.jpg     — one file per photo, addressed by its file name

The store persists only the file name ("token"); the bytes stay on disk.
"""

import asyncio
import logging
import re
from pathlib import Path
from uuid import uuid4

from rent_inspector.application.interfaces import ImageStorage
from rent_inspector.domain.exceptions import ImageNotFoundError

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"^[\w\-]+\.(jpg|jpeg|png|heic|webp)$", re.IGNORECASE)


class LocalImageStorage(ImageStorage):
    """Infrastructure adapter for photo files in a single directory."""

    def __init__(self, photo_dir: str | Path):
        self._photo_dir = Path(photo_dir)
        self._photo_dir.mkdir(parents=True, exist_ok=True)

    @property
    def photo_dir(self) -> Path:
        return self._photo_dir

    async def save_image(self, data: bytes) -> str:
        """Write image bytes to ``<photo_dir>/<uuid4>.jpg`` and return the file name."""
        token = f"{uuid4()}.jpg"
        dest_path = self._photo_dir / token
        await asyncio.to_thread(dest_path.write_bytes, data)
        logger.info("Stored photo: %s (%d bytes)", token, len(data))
        return token

    async def load_image(self, token: str) -> bytes:
        file_path = self._resolve(token)
        if not file_path.is_file():
            raise ImageNotFoundError(token)
        return await asyncio.to_thread(file_path.read_bytes)

    async def delete_image(self, token: str) -> bool:
        """Delete a photo file. Returns False if it did not exist."""
        file_path = self._resolve(token)
        if not file_path.exists():
            return False
        await asyncio.to_thread(file_path.unlink, True)
        logger.info("Deleted photo from disk: %s", token)
        return True

    def file_exists(self, token: str) -> bool:
        try:
            return self._resolve(token).is_file()
        except ImageNotFoundError:
            return False

    def _resolve(self, token: str) -> Path:
        """Map a token to a path inside the photo directory."""
        if not _TOKEN_PATTERN.match(token):
            raise ImageNotFoundError(token)
        return self._photo_dir / token
