"""Record endpoints — list, create from a room plan, edit, export, unlink and delete."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import FileResponse

from rent_inspector.application.schemas import (
    RecordCreate,
    RecordResponse,
    RecordUpdate,
    ReminderUpdate,
    RoomPlanSchema,
    RoomResponse,
)
from rent_inspector.application.services import (
    InspectionStore,
    QueryService,
    RecordCreationService,
    RecordDraft,
    RecordExportService,
    RoomDraft,
    RoomPlan,
    generate_rooms,
)
from rent_inspector.application.services.field_validation import (
    validate_comment,
    validate_record_title,
    validate_reminder_interval,
    validate_room_name,
)
from rent_inspector.application.services.query_service import filter_by_range
from rent_inspector.domain.entities import DateFilter, Room, SortOrder
from rent_inspector.domain.exceptions import FieldValidationError
from rent_inspector.infrastructure.dependencies import (
    get_query_service,
    get_record_creation_service,
    get_record_export_service,
    get_store,
)
from rent_inspector.presentation.api.v1.errors import unwrap_or_raise, validation_error

router = APIRouter(prefix="/records", tags=["Records"])


def _as_utc(value: datetime) -> datetime:
    """Query strings without an offset are read as UTC."""
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _plan_from_schema(plan: RoomPlanSchema) -> RoomPlan:
    return RoomPlan(**plan.model_dump())


def _draft_from_request(data: RecordCreate) -> RecordDraft:
    if data.rooms is not None:
        rooms = [
            RoomDraft(
                room_type=room.room_type,
                custom_name=validate_room_name(room.custom_name),
                comment=validate_comment(room.comment),
            )
            for room in data.rooms
        ]
    else:
        rooms = generate_rooms(_plan_from_schema(data.plan or RoomPlanSchema()))
    return RecordDraft(
        title=validate_record_title(data.title),
        stage=data.stage,
        reminder_interval=validate_reminder_interval(data.reminder_interval),
        property_id=data.property_id,
        rooms=rooms,
    )


@router.get("", response_model=list[RecordResponse])
async def list_records(
    search: str = Query("", description="Case-insensitive match on the display title"),
    date_filter: DateFilter = Query(DateFilter.ALL),
    sort_order: SortOrder = Query(SortOrder.DESCENDING),
    property_id: str | None = Query(None, description="Only records linked to this property"),
    created_from: datetime | None = Query(None, description="Inclusive lower bound on created_at"),
    created_to: datetime | None = Query(None, description="Inclusive upper bound on created_at"),
    store: InspectionStore = Depends(get_store),
    query_service: QueryService = Depends(get_query_service),
) -> list[RecordResponse]:
    """Project the published records through date filter, search and sort."""
    records = store.records
    if property_id is not None:
        records = [r for r in records if r.property_id == property_id]
    if created_from is not None or created_to is not None:
        start = _as_utc(created_from) if created_from else datetime.min.replace(tzinfo=timezone.utc)
        end = _as_utc(created_to) if created_to else datetime.max.replace(tzinfo=timezone.utc)
        if start > end:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="created_from must not be after created_to",
            )
        records = filter_by_range(records, start, end)
    records = query_service.query_records(
        records,
        search=search,
        date_filter=date_filter,
        sort_order=sort_order,
    )
    return [RecordResponse.model_validate(r, from_attributes=True) for r in records]


@router.post("/room-plan", response_model=list[RoomResponse])
async def preview_room_plan(plan: RoomPlanSchema) -> list[RoomResponse]:
    """Rooms a plan would generate, without saving anything."""
    rooms = [
        Room(room_type=draft.room_type, custom_name=draft.custom_name)
        for draft in generate_rooms(_plan_from_schema(plan))
    ]
    return [RoomResponse.model_validate(room, from_attributes=True) for room in rooms]


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: str,
    store: InspectionStore = Depends(get_store),
) -> RecordResponse:
    record = await store.get_record(record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return RecordResponse.model_validate(record, from_attributes=True)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: RecordCreate,
    service: RecordCreationService = Depends(get_record_creation_service),
) -> RecordResponse:
    """Create a record with its rooms and schedule its reminder."""
    try:
        draft = _draft_from_request(data)
    except FieldValidationError as e:
        raise validation_error(e)
    record = unwrap_or_raise(await service.create_record(draft))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.patch("/{record_id}", response_model=RecordResponse)
async def update_record(
    record_id: str,
    data: RecordUpdate,
    store: InspectionStore = Depends(get_store),
) -> RecordResponse:
    """Partial update. The reminder itself is managed through ``/reminder``."""
    try:
        title = validate_record_title(data.title) if data.title is not None else None
    except FieldValidationError as e:
        raise validation_error(e)

    kwargs: dict = {}
    if "property_id" in data.model_fields_set:
        kwargs["property_id"] = data.property_id
    result = await store.update_record(
        record_id,
        title=title,
        stage=data.stage,
        **kwargs,
    )
    record = unwrap_or_raise(result)
    return RecordResponse.model_validate(record, from_attributes=True)


@router.put("/{record_id}/reminder", response_model=RecordResponse)
async def update_reminder(
    record_id: str,
    data: ReminderUpdate,
    service: RecordCreationService = Depends(get_record_creation_service),
) -> RecordResponse:
    """Set the reminder interval in days; 0 turns the reminder off."""
    try:
        days = validate_reminder_interval(data.days)
    except FieldValidationError as e:
        raise validation_error(e)
    record = unwrap_or_raise(await service.update_reminder(record_id, days))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.get("/{record_id}/export", response_class=FileResponse)
async def export_record(
    record_id: str,
    service: RecordExportService = Depends(get_record_export_service),
) -> FileResponse:
    """Render the record, its rooms and photos into a PDF report and download it."""
    path = unwrap_or_raise(await service.export_record(record_id))
    return FileResponse(path, media_type="application/pdf", filename=path.name)


@router.post("/{record_id}/unlink", response_model=RecordResponse)
async def unlink_record(
    record_id: str,
    store: InspectionStore = Depends(get_store),
) -> RecordResponse:
    """Detach the record from its property; nothing is deleted."""
    record = unwrap_or_raise(await store.unlink_record(record_id))
    return RecordResponse.model_validate(record, from_attributes=True)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: str,
    service: RecordCreationService = Depends(get_record_creation_service),
) -> None:
    """Delete a record, its rooms and their photos, and cancel its reminder."""
    unwrap_or_raise(await service.delete_record(record_id))
