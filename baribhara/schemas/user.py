"""User API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from baribhara.domain.enums import UserRole, UserStatus
from baribhara.schemas.common import PartialUpdate, SearchParams

PHONE_PATTERN = r"^\+?[0-9]{6,19}$"


class UserCreate(BaseModel):
    """Request body for creating a user."""

    name: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    national_id: str | None = Field(default=None, max_length=50)
    password: str | None = Field(default=None, min_length=8)
    role: UserRole = UserRole.TENANT


class UserUpdate(PartialUpdate):
    """Request body for updating a user (partial). A null password is rejected, not cleared."""

    not_null_fields = frozenset({"name", "phone_number", "password", "role"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    national_id: str | None = Field(default=None, max_length=50)
    password: str | None = Field(default=None, min_length=8)
    role: UserRole | None = None


class UserResponse(BaseModel):
    """User response (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    phone_number: str
    email: str | None
    national_id: str | None
    role: UserRole
    status: UserStatus
    is_email_verified: bool
    is_phone_verified: bool
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class UserSearchParams(SearchParams):
    """Filters for GET /users/search (query matches name, phone number, email)."""

    role: UserRole | None = None
    status: UserStatus | None = None
