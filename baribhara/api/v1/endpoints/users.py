"""User API: thin routes delegating to UserService."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from baribhara.api.v1.dependencies import get_user_service
from baribhara.application.services import UserService
from baribhara.core.limiter import limit_writes
from baribhara.schemas.common import ApiResponse, SearchParams, paginated
from baribhara.schemas.user import (
    UserCreate,
    UserResponse,
    UserSearchParams,
    UserUpdate,
)

router = APIRouter()

UserSvc = Annotated[UserService, Depends(get_user_service)]


@router.post("", response_model=ApiResponse[UserResponse], status_code=201)
@limit_writes
async def create_user(request: Request, body: UserCreate, svc: UserSvc):
    """Create a user account."""
    created = await svc.create(body)
    return ApiResponse(message="User created successfully", data=created)


@router.get("", response_model=ApiResponse[list[UserResponse]])
async def list_users(params: Annotated[SearchParams, Query()], svc: UserSvc):
    """List users (paginated)."""
    return paginated(await svc.list_all(params))


@router.get("/search", response_model=ApiResponse[list[UserResponse]])
async def search_users(params: Annotated[UserSearchParams, Query()], svc: UserSvc):
    """Search users by name, phone number or email; filter by role and status."""
    return paginated(await svc.search(params))


@router.get("/by-phone/{phone_number}", response_model=ApiResponse[UserResponse])
async def get_user_by_phone(phone_number: str, svc: UserSvc):
    return ApiResponse(data=await svc.get_by_phone_number(phone_number))


@router.get("/by-email/{email}", response_model=ApiResponse[UserResponse])
async def get_user_by_email(email: str, svc: UserSvc):
    return ApiResponse(data=await svc.get_by_email(email))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: UUID, svc: UserSvc):
    """Get a user by id (cached)."""
    return ApiResponse(data=await svc.get(user_id))


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
@limit_writes
async def update_user(request: Request, user_id: UUID, body: UserUpdate, svc: UserSvc):
    """Update a user (only fields present in the body change)."""
    updated = await svc.update(user_id, body)
    return ApiResponse(message="User updated successfully", data=updated)


@router.delete("/{user_id}", response_model=ApiResponse[None])
@limit_writes
async def delete_user(request: Request, user_id: UUID, svc: UserSvc):
    await svc.delete(user_id)
    return ApiResponse(message="User deleted successfully")


@router.post("/{user_id}/verify", response_model=ApiResponse[None])
@limit_writes
async def verify_user(request: Request, user_id: UUID, svc: UserSvc):
    """Mark the user's phone number verified."""
    await svc.verify(user_id)
    return ApiResponse(message="User verified successfully")


@router.post("/{user_id}/suspend", response_model=ApiResponse[None])
@limit_writes
async def suspend_user(request: Request, user_id: UUID, svc: UserSvc):
    await svc.suspend(user_id)
    return ApiResponse(message="User suspended successfully")


@router.post("/{user_id}/activate", response_model=ApiResponse[None])
@limit_writes
async def activate_user(request: Request, user_id: UUID, svc: UserSvc):
    await svc.activate(user_id)
    return ApiResponse(message="User activated successfully")
