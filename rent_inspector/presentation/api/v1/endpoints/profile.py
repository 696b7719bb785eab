"""Profile endpoints — the local user name and summary counters."""

from fastapi import APIRouter, Depends, Request

from rent_inspector.application.schemas import ProfileResponse, ProfileUpdate
from rent_inspector.application.services import InspectionStore
from rent_inspector.application.services.field_validation import validate_user_name
from rent_inspector.config import get_settings
from rent_inspector.domain.exceptions import FieldValidationError
from rent_inspector.infrastructure.dependencies import get_store
from rent_inspector.presentation.api.v1.errors import validation_error

router = APIRouter(prefix="/profile", tags=["Profile"])


def _profile(request: Request, store: InspectionStore) -> ProfileResponse:
    records = store.records
    user_name = getattr(request.app.state, "user_name", None) or get_settings().default_user_name
    return ProfileResponse(
        user_name=user_name,
        record_count=len(records),
        property_count=len(store.properties),
        photo_count=sum(record.total_photos for record in records),
    )


@router.get("", response_model=ProfileResponse)
async def get_profile(
    request: Request,
    store: InspectionStore = Depends(get_store),
) -> ProfileResponse:
    return _profile(request, store)


@router.put("", response_model=ProfileResponse)
async def update_profile(
    data: ProfileUpdate,
    request: Request,
    store: InspectionStore = Depends(get_store),
) -> ProfileResponse:
    """Validate and keep the user name; a blank name resets it to the default."""
    try:
        request.app.state.user_name = validate_user_name(data.user_name)
    except FieldValidationError as e:
        raise validation_error(e)
    return _profile(request, store)
