"""Property endpoints — list, inspect, create and delete rental properties."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from rent_inspector.application.schemas import (
    DisabledStagesResponse,
    PropertyCreate,
    PropertyResponse,
)
from rent_inspector.application.services import InspectionStore, QueryService, disabled_stages
from rent_inspector.domain.entities import DateFilter, SortOrder
from rent_inspector.infrastructure.dependencies import get_query_service, get_store
from rent_inspector.presentation.api.v1.errors import unwrap_or_raise

router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get("", response_model=list[PropertyResponse])
async def list_properties(
    search: str = Query("", description="Case-insensitive match on name or address"),
    date_filter: DateFilter = Query(DateFilter.ALL),
    sort_order: SortOrder = Query(SortOrder.DESCENDING),
    store: InspectionStore = Depends(get_store),
    query_service: QueryService = Depends(get_query_service),
) -> list[PropertyResponse]:
    """Project the published properties through date filter, search and sort."""
    properties = query_service.query_properties(
        store.properties,
        search=search,
        date_filter=date_filter,
        sort_order=sort_order,
    )
    return [PropertyResponse.model_validate(p, from_attributes=True) for p in properties]


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    store: InspectionStore = Depends(get_store),
) -> PropertyResponse:
    prop = await store.get_property(property_id)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return PropertyResponse.model_validate(prop, from_attributes=True)


@router.get("/{property_id}/disabled-stages", response_model=DisabledStagesResponse)
async def get_disabled_stages(
    property_id: str,
    store: InspectionStore = Depends(get_store),
) -> DisabledStagesResponse:
    """Stages a new record for this property may no longer use."""
    prop = await store.get_property(property_id)
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return DisabledStagesResponse(property_id=prop.id, disabled_stages=disabled_stages(prop))


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    data: PropertyCreate,
    store: InspectionStore = Depends(get_store),
) -> PropertyResponse:
    prop = unwrap_or_raise(await store.create_property(name=data.name.strip(), address=data.address.strip()))
    return PropertyResponse.model_validate(prop, from_attributes=True)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(
    property_id: str,
    store: InspectionStore = Depends(get_store),
) -> None:
    """Delete a property. Its records stay and lose their link."""
    unwrap_or_raise(await store.delete_property(property_id))
