"""Room endpoints — add, rename / comment and delete rooms of a record."""

from fastapi import APIRouter, Depends, HTTPException, status

from rent_inspector.application.schemas import RoomCreate, RoomResponse, RoomUpdate
from rent_inspector.application.services import InspectionStore, can_delete_room
from rent_inspector.application.services.field_validation import (
    validate_comment,
    validate_room_name,
)
from rent_inspector.application.services.record_creation_service import next_bathroom_name
from rent_inspector.domain.entities import Room, RoomType
from rent_inspector.domain.exceptions import FieldValidationError
from rent_inspector.infrastructure.dependencies import get_store
from rent_inspector.presentation.api.v1.errors import unwrap_or_raise, validation_error

router = APIRouter(tags=["Rooms"])


@router.post(
    "/records/{record_id}/rooms",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_room(
    record_id: str,
    data: RoomCreate,
    store: InspectionStore = Depends(get_store),
) -> RoomResponse:
    try:
        room = Room(
            room_type=data.room_type,
            custom_name=validate_room_name(data.custom_name),
            comment=validate_comment(data.comment),
        )
    except FieldValidationError as e:
        raise validation_error(e)
    added = unwrap_or_raise(await store.add_room(record_id, room))
    return RoomResponse.model_validate(added, from_attributes=True)


@router.post(
    "/records/{record_id}/rooms/bathroom",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_bathroom(
    record_id: str,
    store: InspectionStore = Depends(get_store),
) -> RoomResponse:
    """Append the next numbered bathroom ("Bathroom 2", "Bathroom 3", ...)."""
    record = await store.get_record(record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    room = Room(
        room_type=RoomType.BATHROOM,
        custom_name=next_bathroom_name(r.room_type for r in record.rooms),
    )
    added = unwrap_or_raise(await store.add_room(record_id, room))
    return RoomResponse.model_validate(added, from_attributes=True)


@router.patch("/rooms/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: str,
    data: RoomUpdate,
    store: InspectionStore = Depends(get_store),
) -> RoomResponse:
    try:
        custom_name = validate_room_name(data.custom_name) if data.custom_name is not None else None
        comment = validate_comment(data.comment) if data.comment is not None else None
    except FieldValidationError as e:
        raise validation_error(e)
    room = unwrap_or_raise(
        await store.update_room(room_id, custom_name=custom_name, comment=comment)
    )
    return RoomResponse.model_validate(room, from_attributes=True)


@router.delete("/records/{record_id}/rooms/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    record_id: str,
    room_id: str,
    store: InspectionStore = Depends(get_store),
) -> None:
    """Delete a room and its photos. Bedrooms, the kitchen and the first bathroom are fixed."""
    record = await store.get_record(record_id)
    if record is not None:
        room_ids = [room.id for room in record.rooms]
        if room_id in room_ids and not can_delete_room(
            [room.room_type for room in record.rooms], room_ids.index(room_id)
        ):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="This room cannot be deleted",
            )
    unwrap_or_raise(await store.delete_room(room_id, record_id))
