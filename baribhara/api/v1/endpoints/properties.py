"""Property API: thin routes delegating to PropertyService."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from baribhara.api.v1.dependencies import get_property_service
from baribhara.application.services import PropertyService
from baribhara.core.limiter import limit_writes
from baribhara.schemas.common import (
    ApiResponse,
    PaginationParams,
    SearchParams,
    paginated,
)
from baribhara.schemas.property import (
    PropertyCreate,
    PropertyResponse,
    PropertySearchParams,
    PropertyUpdate,
)

router = APIRouter()

PropertySvc = Annotated[PropertyService, Depends(get_property_service)]


@router.post("", response_model=ApiResponse[PropertyResponse], status_code=201)
@limit_writes
async def create_property(request: Request, body: PropertyCreate, svc: PropertySvc):
    """Create a property (starts available)."""
    created = await svc.create(body)
    return ApiResponse(message="Property created successfully", data=created)


@router.get("", response_model=ApiResponse[list[PropertyResponse]])
async def list_properties(
    params: Annotated[SearchParams, Query()], svc: PropertySvc
):
    """List all properties (paginated)."""
    return paginated(await svc.list_all(params))


@router.get("/search", response_model=ApiResponse[list[PropertyResponse]])
async def search_properties(
    params: Annotated[PropertySearchParams, Query()], svc: PropertySvc
):
    """Search properties by text, location, type and rent/bedroom ranges."""
    return paginated(await svc.search(params))


@router.get(
    "/by-caretaker/{caretaker_id}",
    response_model=ApiResponse[list[PropertyResponse]],
)
async def list_properties_by_caretaker(
    caretaker_id: UUID,
    params: Annotated[PaginationParams, Query()],
    svc: PropertySvc,
):
    """Properties managed by a caretaker."""
    return paginated(await svc.list_by_caretaker(caretaker_id, params))


@router.get("/{property_id}", response_model=ApiResponse[PropertyResponse])
async def get_property(property_id: UUID, svc: PropertySvc):
    """Get a property by id (cached)."""
    return ApiResponse(data=await svc.get(property_id))


@router.put("/{property_id}", response_model=ApiResponse[PropertyResponse])
@limit_writes
async def update_property(
    request: Request, property_id: UUID, body: PropertyUpdate, svc: PropertySvc
):
    """Update a property (only fields present in the body change)."""
    updated = await svc.update(property_id, body)
    return ApiResponse(message="Property updated successfully", data=updated)


@router.delete("/{property_id}", response_model=ApiResponse[None])
@limit_writes
async def delete_property(request: Request, property_id: UUID, svc: PropertySvc):
    """Delete a property."""
    await svc.delete(property_id)
    return ApiResponse(message="Property deleted successfully")
