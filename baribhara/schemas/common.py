"""Shared API schemas: response envelope, pagination and search parameters."""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from baribhara.application.dtos.search import Page
from baribhara.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT
from baribhara.domain.enums import SortOrder

DataT = TypeVar("DataT")


class PageMeta(BaseModel):
    """Pagination metadata for list responses."""

    page: int
    limit: int
    total: int
    total_pages: int


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard response envelope for every endpoint."""

    success: bool = True
    message: str = "OK"
    data: DataT | None = None
    errors: list[str] | None = None
    meta: PageMeta | None = None


class PartialUpdate(BaseModel):
    """Base for partial update bodies.

    Omitted fields are left unchanged. Fields named in not_null_fields back
    NOT NULL columns and reject an explicit null; the rest may be cleared.
    """

    not_null_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_null_for_not_null_columns(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(f for f in cls.not_null_fields if f in data and data[f] is None)
            if nulls:
                raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return data


class PaginationParams(BaseModel):
    """Offset pagination. limit above the maximum is clamped by the service."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1)
    sort_by: str | None = Field(default=None, description="Column from the resource allow-list")
    sort_order: SortOrder = SortOrder.DESC


class SearchParams(PaginationParams):
    """Pagination plus a free-text term matched across the resource's text fields."""

    query: str | None = Field(default=None, max_length=255)


def paginated(page: Page[Any], message: str = "OK") -> ApiResponse[list[Any]]:
    """Success envelope for one page of results, with meta."""
    return ApiResponse[list[Any]](
        message=message,
        data=list(page.items),
        meta=PageMeta(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        ),
    )
