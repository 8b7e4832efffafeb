"""Caretaker API schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from baribhara.domain.enums import CaretakerStatus, CaretakerType
from baribhara.schemas.common import PartialUpdate, SearchParams
from baribhara.schemas.user import PHONE_PATTERN


class CaretakerCreate(BaseModel):
    """Request body for creating a caretaker."""

    name: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    national_id: str | None = Field(default=None, max_length=50)
    type: CaretakerType = CaretakerType.INDIVIDUAL
    company_name: str | None = Field(default=None, max_length=255)
    license_number: str | None = Field(default=None, max_length=100)
    description: str | None = None
    street: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    district: str | None = Field(default=None, max_length=100)
    division: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, max_length=20)
    specialties: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    documents: list[str] = Field(default_factory=list)
    user_id: UUID


class CaretakerUpdate(PartialUpdate):
    """Request body for updating a caretaker (partial). Status changes use suspend/activate."""

    not_null_fields = frozenset(
        {"name", "phone_number", "type", "specialties", "languages", "documents", "rating"}
    )

    name: str | None = Field(default=None, min_length=1, max_length=255)
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    national_id: str | None = Field(default=None, max_length=50)
    type: CaretakerType | None = None
    company_name: str | None = Field(default=None, max_length=255)
    license_number: str | None = Field(default=None, max_length=100)
    description: str | None = None
    street: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    district: str | None = Field(default=None, max_length=100)
    division: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, max_length=20)
    specialties: list[str] | None = None
    languages: list[str] | None = None
    documents: list[str] | None = None
    rating: Decimal | None = Field(default=None, ge=0, le=5)


class CaretakerResponse(BaseModel):
    """Caretaker response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    phone_number: str
    email: str | None
    national_id: str | None
    type: CaretakerType
    status: CaretakerStatus
    company_name: str | None
    license_number: str | None
    description: str | None
    street: str | None
    city: str | None
    district: str | None
    division: str | None
    postal_code: str | None
    specialties: list[str]
    languages: list[str]
    rating: Decimal
    total_properties: int
    active_properties: int
    total_tenants: int
    is_verified: bool
    verified_at: datetime | None
    documents: list[str]
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class CaretakerSearchParams(SearchParams):
    """Filters for GET /caretakers/search. Only active caretakers match."""

    city: str | None = None
    type: CaretakerType | None = None
    specialties: list[str] | None = None
    min_rating: Decimal | None = Field(default=None, ge=0, le=5)
