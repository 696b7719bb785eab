"""SQLAlchemy ORM model for the Property entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rent_inspector.infrastructure.database.base import Base


class PropertyModel(Base):
    """ORM model — maps to the 'properties' table.

    ``records`` is an association, not ownership: read-only, no delete cascade.
    """

    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    address: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    records = relationship(
        "RecordModel",
        viewonly=True,
        order_by="RecordModel.created_at.desc()",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<PropertyModel(id={self.id}, name='{self.name}')>"
