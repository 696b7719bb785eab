"""Concrete repository implementation for Record backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from rent_inspector.application.interfaces import RecordRepository
from rent_inspector.domain.entities import Record
from rent_inspector.infrastructure.database.models import RecordModel, RoomModel

from .mappers import record_to_entity, record_to_model


class SQLAlchemyRecordRepository(RecordRepository):
    """Implements the RecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, record_id: str) -> Record | None:
        result = await self._session.get(RecordModel, record_id)
        return record_to_entity(result) if result else None

    async def get_all(self) -> list[Record]:
        stmt = select(RecordModel).order_by(RecordModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [record_to_entity(row) for row in result.scalars().all()]

    async def create(self, record: Record) -> Record:
        model = record_to_model(record)
        self._session.add(model)
        await self._session.flush()
        return record_to_entity(model)

    async def update(self, record: Record) -> Record:
        model = await self._session.get(RecordModel, record.id)
        if model is None:
            raise ValueError(f"Record {record.id} not found in database")
        model.title = record.title
        model.stage = record.stage.value
        model.reminder_interval = record.reminder_interval
        model.next_reminder_date = record.next_reminder_date
        model.property_id = record.property_id
        model.updated_at = record.updated_at
        await self._session.flush()
        return record_to_entity(model)

    async def delete(self, record_id: str) -> bool:
        model = await self._session.get(RecordModel, record_id)
        if model is None:
            return False
        # delete-orphan cascade: the unit of work removes the rooms before the record
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def unlink_property(self, property_id: str) -> int:
        stmt = (
            update(RecordModel)
            .where(RecordModel.property_id == property_id)
            .values(property_id=None)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    async def delete_all(self) -> int:
        await self._session.execute(delete(RoomModel))
        result = await self._session.execute(delete(RecordModel))
        await self._session.flush()
        return result.rowcount or 0
