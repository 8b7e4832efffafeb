"""Caretaker API: thin routes delegating to CaretakerService."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from baribhara.api.v1.dependencies import get_caretaker_service
from baribhara.application.services import CaretakerService
from baribhara.core.constants import DEFAULT_TOP_RATED_LIMIT, MAX_PAGE_LIMIT
from baribhara.core.limiter import limit_writes
from baribhara.schemas.caretaker import (
    CaretakerCreate,
    CaretakerResponse,
    CaretakerSearchParams,
    CaretakerUpdate,
)
from baribhara.schemas.common import (
    ApiResponse,
    PaginationParams,
    SearchParams,
    paginated,
)

router = APIRouter()

CaretakerSvc = Annotated[CaretakerService, Depends(get_caretaker_service)]


@router.post("", response_model=ApiResponse[CaretakerResponse], status_code=201)
@limit_writes
async def create_caretaker(request: Request, body: CaretakerCreate, svc: CaretakerSvc):
    """Create a caretaker profile."""
    created = await svc.create(body)
    return ApiResponse(message="Caretaker created successfully", data=created)


@router.get("", response_model=ApiResponse[list[CaretakerResponse]])
async def list_caretakers(params: Annotated[SearchParams, Query()], svc: CaretakerSvc):
    """List caretakers (paginated)."""
    return paginated(await svc.list_all(params))


@router.get("/search", response_model=ApiResponse[list[CaretakerResponse]])
async def search_caretakers(
    params: Annotated[CaretakerSearchParams, Query()], svc: CaretakerSvc
):
    """Search active caretakers by text, specialties and minimum rating."""
    return paginated(await svc.search(params))


@router.get("/verified", response_model=ApiResponse[list[CaretakerResponse]])
async def list_verified_caretakers(
    params: Annotated[PaginationParams, Query()], svc: CaretakerSvc
):
    return paginated(await svc.list_verified(params))


@router.get("/top-rated", response_model=ApiResponse[list[CaretakerResponse]])
async def list_top_rated_caretakers(
    svc: CaretakerSvc,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_LIMIT)] = DEFAULT_TOP_RATED_LIMIT,
):
    """Verified, active caretakers with the highest rating."""
    return ApiResponse(data=await svc.top_rated(limit))


@router.get("/by-user/{user_id}", response_model=ApiResponse[CaretakerResponse])
async def get_caretaker_by_user(user_id: UUID, svc: CaretakerSvc):
    return ApiResponse(data=await svc.get_by_user(user_id))


@router.get("/{caretaker_id}", response_model=ApiResponse[CaretakerResponse])
async def get_caretaker(caretaker_id: UUID, svc: CaretakerSvc):
    """Get a caretaker by id (cached)."""
    return ApiResponse(data=await svc.get(caretaker_id))


@router.put("/{caretaker_id}", response_model=ApiResponse[CaretakerResponse])
@limit_writes
async def update_caretaker(
    request: Request, caretaker_id: UUID, body: CaretakerUpdate, svc: CaretakerSvc
):
    """Update a caretaker (only fields present in the body change)."""
    updated = await svc.update(caretaker_id, body)
    return ApiResponse(message="Caretaker updated successfully", data=updated)


@router.delete("/{caretaker_id}", response_model=ApiResponse[None])
@limit_writes
async def delete_caretaker(request: Request, caretaker_id: UUID, svc: CaretakerSvc):
    await svc.delete(caretaker_id)
    return ApiResponse(message="Caretaker deleted successfully")


@router.post("/{caretaker_id}/verify", response_model=ApiResponse[None])
@limit_writes
async def verify_caretaker(request: Request, caretaker_id: UUID, svc: CaretakerSvc):
    await svc.verify(caretaker_id)
    return ApiResponse(message="Caretaker verified successfully")


@router.post("/{caretaker_id}/suspend", response_model=ApiResponse[None])
@limit_writes
async def suspend_caretaker(request: Request, caretaker_id: UUID, svc: CaretakerSvc):
    await svc.suspend(caretaker_id)
    return ApiResponse(message="Caretaker suspended successfully")


@router.post("/{caretaker_id}/activate", response_model=ApiResponse[None])
@limit_writes
async def activate_caretaker(request: Request, caretaker_id: UUID, svc: CaretakerSvc):
    await svc.activate(caretaker_id)
    return ApiResponse(message="Caretaker activated successfully")
