"""Concrete repository implementation for Room backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rent_inspector.application.interfaces import RoomRepository
from rent_inspector.domain.entities import Room
from rent_inspector.infrastructure.database.models import RecordModel, RoomModel

from .mappers import room_to_entity, room_to_model


class SQLAlchemyRoomRepository(RoomRepository):
    """Implements the RoomRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, room_id: str) -> Room | None:
        result = await self._session.get(RoomModel, room_id)
        return room_to_entity(result) if result else None

    async def get_record_id(self, room_id: str) -> str | None:
        stmt = select(RoomModel.record_id).where(RoomModel.id == room_id)
        return await self._session.scalar(stmt)

    async def append_to_record(self, record_id: str, room: Room) -> Room | None:
        record = await self._session.get(RecordModel, record_id)
        if record is None:
            return None
        model = room_to_model(room, position=len(record.rooms))
        record.rooms.append(model)
        await self._session.flush()
        return room_to_entity(model)

    async def update(self, room: Room) -> Room:
        model = await self._session.get(RoomModel, room.id)
        if model is None:
            raise ValueError(f"Room {room.id} not found in database")
        model.custom_name = room.custom_name
        model.comment = room.comment
        model.photo_paths = list(room.photo_paths)
        await self._session.flush()
        return room_to_entity(model)

    async def remove_from_record(self, record_id: str, room_id: str) -> bool:
        record = await self._session.get(RecordModel, record_id)
        if record is None:
            return False
        model = next((room for room in record.rooms if room.id == room_id), None)
        if model is None:
            return False
        record.rooms.remove(model)
        await self._session.delete(model)
        await self._session.flush()
        return True
