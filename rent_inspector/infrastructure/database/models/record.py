"""SQLAlchemy ORM model for the Record entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rent_inspector.infrastructure.database.base import Base


class RecordModel(Base):
    """ORM model — maps to the 'records' table.

    Rooms are owned (delete-orphan cascade, kept in list order through
    ``position``); the property link is a plain nullable foreign key.
    """

    __tablename__ = "records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    stage: Mapped[str] = mapped_column(String(20), nullable=False)
    reminder_interval: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    next_reminder_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    property_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    rooms = relationship(
        "RoomModel",
        order_by="RoomModel.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<RecordModel(id={self.id}, title='{self.title}', stage='{self.stage}')>"
