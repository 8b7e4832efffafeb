"""Property API schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from baribhara.domain.enums import PropertyStatus, PropertyType
from baribhara.schemas.common import PartialUpdate, SearchParams


class PropertyCreate(BaseModel):
    """Request body for creating a property. Status starts as available."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    type: PropertyType
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    district: str = Field(..., min_length=1, max_length=100)
    division: str = Field(..., min_length=1, max_length=100)
    postal_code: str | None = Field(default=None, max_length=20)
    landmark: str | None = Field(default=None, max_length=255)
    rent_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    security_deposit: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    area: Decimal | None = Field(default=None, ge=0)
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: int = Field(default=0, ge=0)
    floor: int | None = None
    total_floors: int | None = Field(default=None, ge=0)
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    caretaker_id: UUID


class PropertyUpdate(PartialUpdate):
    """Request body for updating a property (partial)."""

    not_null_fields = frozenset(
        {
            "name", "type", "status", "street", "city", "district", "division",
            "rent_amount", "security_deposit", "bedrooms", "bathrooms",
            "amenities", "images",
        }
    )

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    type: PropertyType | None = None
    status: PropertyStatus | None = None
    street: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    district: str | None = Field(default=None, min_length=1, max_length=100)
    division: str | None = Field(default=None, min_length=1, max_length=100)
    postal_code: str | None = Field(default=None, max_length=20)
    landmark: str | None = Field(default=None, max_length=255)
    rent_amount: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    security_deposit: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    area: Decimal | None = Field(default=None, ge=0)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    floor: int | None = None
    total_floors: int | None = Field(default=None, ge=0)
    amenities: list[str] | None = None
    images: list[str] | None = None
    current_tenant_id: UUID | None = None


class PropertyResponse(BaseModel):
    """Property response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None
    type: PropertyType
    status: PropertyStatus
    street: str
    city: str
    district: str
    division: str
    postal_code: str | None
    landmark: str | None
    rent_amount: Decimal
    security_deposit: Decimal
    area: Decimal | None
    bedrooms: int
    bathrooms: int
    floor: int | None
    total_floors: int | None
    amenities: list[str]
    images: list[str]
    caretaker_id: UUID
    current_tenant_id: UUID | None
    created_at: datetime
    updated_at: datetime


class PropertySearchParams(SearchParams):
    """Filters for GET /properties/search. Without status, only available properties match."""

    city: str | None = None
    district: str | None = None
    type: PropertyType | None = None
    status: PropertyStatus | None = None
    min_rent: Decimal | None = Field(default=None, ge=0)
    max_rent: Decimal | None = Field(default=None, ge=0)
    min_bedrooms: int | None = Field(default=None, ge=0)
    max_bedrooms: int | None = Field(default=None, ge=0)
