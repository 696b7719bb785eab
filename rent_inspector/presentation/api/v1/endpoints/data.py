"""Bulk data endpoint — wipe everything the store holds."""

from fastapi import APIRouter, Depends, status

from rent_inspector.application.services import RecordCreationService
from rent_inspector.infrastructure.dependencies import get_record_creation_service
from rent_inspector.presentation.api.v1.errors import unwrap_or_raise

router = APIRouter(prefix="/data", tags=["Data"])


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_all_data(
    service: RecordCreationService = Depends(get_record_creation_service),
) -> None:
    """Delete every property, record, room and photo. 409 when there is nothing to delete."""
    unwrap_or_raise(await service.clear_all())
