"""Tenant API: thin routes delegating to TenantService."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from baribhara.api.v1.dependencies import get_tenant_service
from baribhara.application.services import TenantService
from baribhara.core.limiter import limit_writes
from baribhara.schemas.common import (
    ApiResponse,
    PaginationParams,
    SearchParams,
    paginated,
)
from baribhara.schemas.tenant import (
    TenantAssignProperty,
    TenantCreate,
    TenantResponse,
    TenantSearchParams,
    TenantUpdate,
)

router = APIRouter()

TenantSvc = Annotated[TenantService, Depends(get_tenant_service)]


@router.post("", response_model=ApiResponse[TenantResponse], status_code=201)
@limit_writes
async def create_tenant(request: Request, body: TenantCreate, svc: TenantSvc):
    """Create a tenant profile."""
    created = await svc.create(body)
    return ApiResponse(message="Tenant created successfully", data=created)


@router.get("", response_model=ApiResponse[list[TenantResponse]])
async def list_tenants(params: Annotated[SearchParams, Query()], svc: TenantSvc):
    """List tenants (paginated)."""
    return paginated(await svc.list_all(params))


@router.get("/search", response_model=ApiResponse[list[TenantResponse]])
async def search_tenants(
    params: Annotated[TenantSearchParams, Query()], svc: TenantSvc
):
    """Search tenants by name, phone number or email; filter by location, type, status."""
    return paginated(await svc.search(params))


@router.get("/verified", response_model=ApiResponse[list[TenantResponse]])
async def list_verified_tenants(
    params: Annotated[PaginationParams, Query()], svc: TenantSvc
):
    return paginated(await svc.list_verified(params))


@router.get("/by-user/{user_id}", response_model=ApiResponse[TenantResponse])
async def get_tenant_by_user(user_id: UUID, svc: TenantSvc):
    return ApiResponse(data=await svc.get_by_user(user_id))


@router.get(
    "/by-property/{property_id}", response_model=ApiResponse[list[TenantResponse]]
)
async def list_tenants_by_property(
    property_id: UUID,
    params: Annotated[PaginationParams, Query()],
    svc: TenantSvc,
):
    return paginated(await svc.list_by_property(property_id, params))


@router.get(
    "/by-caretaker/{caretaker_id}", response_model=ApiResponse[list[TenantResponse]]
)
async def list_tenants_by_caretaker(
    caretaker_id: UUID,
    params: Annotated[PaginationParams, Query()],
    svc: TenantSvc,
):
    return paginated(await svc.list_by_caretaker(caretaker_id, params))


@router.get("/{tenant_id}", response_model=ApiResponse[TenantResponse])
async def get_tenant(tenant_id: UUID, svc: TenantSvc):
    """Get a tenant by id (cached)."""
    return ApiResponse(data=await svc.get(tenant_id))


@router.put("/{tenant_id}", response_model=ApiResponse[TenantResponse])
@limit_writes
async def update_tenant(
    request: Request, tenant_id: UUID, body: TenantUpdate, svc: TenantSvc
):
    """Update a tenant (only fields present in the body change)."""
    updated = await svc.update(tenant_id, body)
    return ApiResponse(message="Tenant updated successfully", data=updated)


@router.delete("/{tenant_id}", response_model=ApiResponse[None])
@limit_writes
async def delete_tenant(request: Request, tenant_id: UUID, svc: TenantSvc):
    await svc.delete(tenant_id)
    return ApiResponse(message="Tenant deleted successfully")


@router.post("/{tenant_id}/verify", response_model=ApiResponse[None])
@limit_writes
async def verify_tenant(request: Request, tenant_id: UUID, svc: TenantSvc):
    await svc.verify(tenant_id)
    return ApiResponse(message="Tenant verified successfully")


@router.post("/{tenant_id}/assign-property", response_model=ApiResponse[None])
@limit_writes
async def assign_property(
    request: Request, tenant_id: UUID, body: TenantAssignProperty, svc: TenantSvc
):
    """Assign the tenant to a property; the property is marked occupied asynchronously."""
    await svc.assign_property(tenant_id, body)
    return ApiResponse(message="Property assigned successfully")


@router.post("/{tenant_id}/remove-property", response_model=ApiResponse[None])
@limit_writes
async def remove_property(request: Request, tenant_id: UUID, svc: TenantSvc):
    """End the tenant's current lease; the property becomes available asynchronously."""
    await svc.remove_property(tenant_id)
    return ApiResponse(message="Property removed successfully")
