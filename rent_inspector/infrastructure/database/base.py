"""Declarative base shared by the store's tables."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Stable constraint names so SQLite files created by any version match
_NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for the property, record, room and schema-info tables."""

    metadata = MetaData(naming_convention=_NAMING_CONVENTION)
