"""Domain entity for a single room inside an inspection record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class RoomType(str, Enum):
    """Kinds of rooms an inspection can cover."""

    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    BALCONY = "balcony"
    LOGGIA = "loggia"
    WARDROBE = "wardrobe"
    STORAGE = "storage"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, raw: str) -> "RoomType":
        """Map a persisted value to a room type, falling back to OTHER."""
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


@dataclass
class Room:
    """A room with its photos, referenced by file-name tokens."""

    room_type: RoomType = RoomType.OTHER
    custom_name: str = ""
    comment: str = ""
    photo_paths: list[str] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def display_name(self) -> str:
        return self.custom_name or self.room_type.display_name

    @property
    def photo_count(self) -> int:
        return len(self.photo_paths)

    def detached(self) -> "Room":
        return Room(
            room_type=self.room_type,
            custom_name=self.custom_name,
            comment=self.comment,
            photo_paths=list(self.photo_paths),
            id=self.id,
            created_at=self.created_at,
        )
