"""Concrete repository implementation for Property backed by SQLAlchemy."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rent_inspector.application.interfaces import PropertyRepository
from rent_inspector.domain.entities import Property
from rent_inspector.infrastructure.database.models import PropertyModel

from .mappers import property_to_entity, property_to_model


class SQLAlchemyPropertyRepository(PropertyRepository):
    """Implements the PropertyRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, property_id: str) -> Property | None:
        result = await self._session.get(PropertyModel, property_id)
        return property_to_entity(result) if result else None

    async def get_all(self) -> list[Property]:
        stmt = select(PropertyModel).order_by(PropertyModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [property_to_entity(row) for row in result.scalars().all()]

    async def exists(self, property_id: str) -> bool:
        stmt = select(func.count()).select_from(PropertyModel).where(PropertyModel.id == property_id)
        return (await self._session.scalar(stmt) or 0) > 0

    async def create(self, prop: Property) -> Property:
        model = property_to_model(prop)
        self._session.add(model)
        await self._session.flush()
        return property_to_entity(model)

    async def delete(self, property_id: str) -> bool:
        model = await self._session.get(PropertyModel, property_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(PropertyModel))
        await self._session.flush()
        return result.rowcount or 0
