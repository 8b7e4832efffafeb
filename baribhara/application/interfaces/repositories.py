"""Repository interface (port) for the resource services.

Protocol defines the contract that infrastructure implementations must
fulfill (DIP). Entities are the ORM rows of each resource; the service maps
them to response schemas.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar
from uuid import UUID

if TYPE_CHECKING:
    from baribhara.application.dtos.search import SearchQuery

EntityT = TypeVar("EntityT")


class IResourceRepository(Protocol[EntityT]):
    """Protocol for a directory resource repository."""

    async def get_by_id(self, entity_id: UUID) -> EntityT | None:
        """Return the record with this id, or None."""
        ...

    async def get_by(self, field: str, value: Any) -> EntityT | None:
        """Return the first record whose field equals value, or None."""
        ...

    async def find_conflict(
        self, criteria: Mapping[str, Any], exclude_id: UUID | None = None
    ) -> EntityT | None:
        """Return a record matching any of criteria, other than exclude_id."""
        ...

    async def create(self, data: Mapping[str, Any]) -> EntityT:
        """Persist a new record. Unique-index violations raise ResourceConflictException."""
        ...

    async def save(self, obj: EntityT, changes: Mapping[str, Any]) -> EntityT:
        """Apply changes to an existing record and persist it."""
        ...

    async def delete_by_id(self, entity_id: UUID) -> int:
        """Delete by id. Returns affected row count (0 when absent)."""
        ...

    async def search(self, query: SearchQuery) -> tuple[list[EntityT], int]:
        """Return (items in the window, total matching)."""
        ...
