"""Pydantic request/response schemas for the API."""

from baribhara.schemas.caretaker import (
    CaretakerCreate,
    CaretakerResponse,
    CaretakerSearchParams,
    CaretakerUpdate,
)
from baribhara.schemas.common import ApiResponse, PageMeta, PaginationParams, SearchParams
from baribhara.schemas.health import HealthResponse
from baribhara.schemas.property import (
    PropertyCreate,
    PropertyResponse,
    PropertySearchParams,
    PropertyUpdate,
)
from baribhara.schemas.tenant import (
    TenantAssignProperty,
    TenantCreate,
    TenantResponse,
    TenantSearchParams,
    TenantUpdate,
)
from baribhara.schemas.user import UserCreate, UserResponse, UserSearchParams, UserUpdate

__all__ = [
    "ApiResponse",
    "CaretakerCreate",
    "CaretakerResponse",
    "CaretakerSearchParams",
    "CaretakerUpdate",
    "HealthResponse",
    "PageMeta",
    "PaginationParams",
    "PropertyCreate",
    "PropertyResponse",
    "PropertySearchParams",
    "PropertyUpdate",
    "SearchParams",
    "TenantAssignProperty",
    "TenantCreate",
    "TenantResponse",
    "TenantSearchParams",
    "TenantUpdate",
    "UserCreate",
    "UserResponse",
    "UserSearchParams",
    "UserUpdate",
]
