"""SQLAlchemy ORM model for the Room entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rent_inspector.infrastructure.database.base import Base


class RoomModel(Base):
    """ORM model — maps to the 'rooms' table."""

    __tablename__ = "rooms"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    record_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("records.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    room_type: Mapped[str] = mapped_column(String(20), nullable=False)
    custom_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Ordered file-name tokens; reassign the list to persist changes
    photo_paths: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


    def __repr__(self) -> str:
        return f"<RoomModel(id={self.id}, type='{self.room_type}', record={self.record_id})>"
