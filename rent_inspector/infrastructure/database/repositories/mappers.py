"""ORM model <-> domain entity mapping shared by the repositories.

Every entity built here is a fresh value with its own lists, so nothing
handed out aliases session state.
"""

from datetime import datetime, timezone

from rent_inspector.domain.entities import Property, Record, RecordStage, Room, RoomType
from rent_inspector.infrastructure.database.models import PropertyModel, RecordModel, RoomModel


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite returns naive datetimes; stored values are always UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def room_to_entity(model: RoomModel) -> Room:
    return Room(
        id=model.id,
        room_type=RoomType.parse(model.room_type),
        custom_name=model.custom_name,
        comment=model.comment,
        photo_paths=list(model.photo_paths or []),
        created_at=as_utc(model.created_at),
    )


def room_to_model(entity: Room, position: int = 0) -> RoomModel:
    return RoomModel(
        id=entity.id,
        position=position,
        room_type=entity.room_type.value,
        custom_name=entity.custom_name,
        comment=entity.comment,
        photo_paths=list(entity.photo_paths),
        created_at=entity.created_at,
    )


def record_to_entity(model: RecordModel) -> Record:
    record = Record(
        id=model.id,
        title=model.title,
        stage=RecordStage.parse(model.stage),
        rooms=[room_to_entity(room) for room in model.rooms],
        reminder_interval=model.reminder_interval,
        property_id=model.property_id,
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )
    record.next_reminder_date = as_utc(model.next_reminder_date)
    return record


def record_to_model(entity: Record) -> RecordModel:
    return RecordModel(
        id=entity.id,
        title=entity.title,
        stage=entity.stage.value,
        reminder_interval=entity.reminder_interval,
        next_reminder_date=entity.next_reminder_date,
        property_id=entity.property_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
        rooms=[room_to_model(room, position) for position, room in enumerate(entity.rooms)],
    )


def property_to_entity(model: PropertyModel) -> Property:
    return Property(
        id=model.id,
        name=model.name,
        address=model.address,
        created_at=as_utc(model.created_at),
        records=[record_to_entity(record) for record in model.records],
    )


def property_to_model(entity: Property) -> PropertyModel:
    return PropertyModel(
        id=entity.id,
        name=entity.name,
        address=entity.address,
        created_at=entity.created_at,
        records=[],
    )
