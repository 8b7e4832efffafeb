"""DTOs for repository search (query-builder input and paged result).

SearchQuery is storage-agnostic: the SQLAlchemy repositories translate it
to WHERE/ORDER BY/OFFSET/LIMIT, and in-memory test repositories evaluate it
directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil
from typing import Any, Generic, TypeVar

from baribhara.domain.enums import SortOrder


@dataclass(frozen=True)
class Range:
    """Inclusive range filter; a None bound is open."""

    minimum: Any = None
    maximum: Any = None

    def is_open(self) -> bool:
        return self.minimum is None and self.maximum is None


@dataclass(frozen=True)
class SearchQuery:
    """Filters, ordering and window for a repository search.

    Filters are ANDed. text matches case-insensitively as a substring of any
    of text_fields (OR). order_by is applied in sequence; repositories add a
    final tie-break on id so pages are stable.
    """

    equals: dict[str, Any] = field(default_factory=dict)
    ranges: dict[str, Range] = field(default_factory=dict)
    overlaps: dict[str, list[str]] = field(default_factory=dict)
    text: str | None = None
    text_fields: tuple[str, ...] = ()
    order_by: tuple[tuple[str, SortOrder], ...] = (("created_at", SortOrder.DESC),)
    skip: int = 0
    limit: int = 10

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total matching count."""

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit) if self.limit else 0
