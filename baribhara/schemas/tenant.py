"""Tenant API schemas."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from baribhara.domain.enums import TenantStatus, TenantType
from baribhara.schemas.common import PartialUpdate, SearchParams
from baribhara.schemas.user import PHONE_PATTERN


class _TenantProfile(BaseModel):
    """Optional profile fields shared by create and update."""

    email: EmailStr | None = None
    national_id: str | None = Field(default=None, max_length=50)
    emergency_contact_name: str | None = Field(default=None, max_length=255)
    emergency_contact_phone: str | None = Field(default=None, pattern=PHONE_PATTERN)
    emergency_contact_relation: str | None = Field(default=None, max_length=50)
    street: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    district: str | None = Field(default=None, max_length=100)
    division: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, max_length=20)
    occupation: str | None = Field(default=None, max_length=100)
    employer: str | None = Field(default=None, max_length=255)
    monthly_income: Decimal | None = Field(default=None, ge=0)
    preferred_payment_method: str | None = Field(default=None, max_length=30)
    bank_account_number: str | None = Field(default=None, max_length=50)
    bank_name: str | None = Field(default=None, max_length=100)
    bkash_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    nagad_number: str | None = Field(default=None, pattern=PHONE_PATTERN)


class TenantCreate(_TenantProfile):
    """Request body for creating a tenant."""

    name: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    type: TenantType = TenantType.INDIVIDUAL
    preferences: list[str] = Field(default_factory=list)
    documents: list[str] = Field(default_factory=list)
    user_id: UUID
    caretaker_id: UUID | None = None


class TenantUpdate(_TenantProfile, PartialUpdate):
    """Request body for updating a tenant (partial)."""

    not_null_fields = frozenset(
        {"name", "phone_number", "type", "status", "preferences", "documents"}
    )

    name: str | None = Field(default=None, min_length=1, max_length=255)
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    type: TenantType | None = None
    status: TenantStatus | None = None
    preferences: list[str] | None = None
    documents: list[str] | None = None


class TenantAssignProperty(BaseModel):
    """Request body for assigning a tenant to a property (lease block)."""

    property_id: UUID
    caretaker_id: UUID
    lease_start_date: date
    lease_end_date: date
    monthly_rent: Decimal = Field(..., ge=0)
    security_deposit: Decimal = Field(default=Decimal("0"), ge=0)
    lease_terms: str | None = None

    @model_validator(mode="after")
    def check_lease_dates(self) -> "TenantAssignProperty":
        if self.lease_end_date < self.lease_start_date:
            raise ValueError("lease_end_date must not be before lease_start_date")
        return self


class TenantResponse(BaseModel):
    """Tenant response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    phone_number: str
    email: str | None
    national_id: str | None
    type: TenantType
    status: TenantStatus
    emergency_contact_name: str | None
    emergency_contact_phone: str | None
    emergency_contact_relation: str | None
    street: str | None
    city: str | None
    district: str | None
    division: str | None
    postal_code: str | None
    occupation: str | None
    employer: str | None
    monthly_income: Decimal | None
    preferences: list[str]
    documents: list[str]
    user_id: UUID
    current_property_id: UUID | None
    caretaker_id: UUID | None
    lease_start_date: date | None
    lease_end_date: date | None
    monthly_rent: Decimal | None
    security_deposit: Decimal | None
    lease_terms: str | None
    preferred_payment_method: str | None
    bank_account_number: str | None
    bank_name: str | None
    bkash_number: str | None
    nagad_number: str | None
    is_verified: bool
    verified_at: datetime | None
    total_properties: int
    active_leases: int
    created_at: datetime
    updated_at: datetime


class TenantSearchParams(SearchParams):
    """Filters for GET /tenants/search (query matches name, phone number, email)."""

    city: str | None = None
    district: str | None = None
    type: TenantType | None = None
    status: TenantStatus | None = None
