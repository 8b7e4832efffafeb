"""Application DTOs (no dependency on ORM)."""

from baribhara.application.dtos.search import Page, Range, SearchQuery

__all__ = ["Page", "Range", "SearchQuery"]
