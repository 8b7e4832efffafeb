"""Read-through cache and change-event protocol shared by every directory resource.

A ResourceService wraps one repository, one cache and one event publisher:

- get: cache first ("{resource}:{id}"); on a miss load from the repository,
  project to the response schema, store its JSON with the TTL.
- create/update/transitions: enforce natural-key uniqueness, persist, then
  overwrite the cache entry and emit exactly one event.
- delete: delete the row, drop the cache key, emit "{resource}.deleted".
- search/listings: always query the repository, never the cache.

Repository and cache errors propagate unchanged. The cache and the event are
refreshed after the write commits; they are not transactional with it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast
from uuid import UUID

from pydantic import BaseModel

from baribhara.application.dtos.search import Page, SearchQuery
from baribhara.core.constants import DEFAULT_RESOURCE_CACHE_TTL, MAX_PAGE_LIMIT
from baribhara.domain.enums import ResourceType, SortOrder
from baribhara.domain.events import ResourceTopics, Topic
from baribhara.domain.exceptions import (
    ResourceConflictException,
    ResourceNotFoundException,
    ValidationException,
)
from baribhara.infrastructure.cache.keys import resource_key

if TYPE_CHECKING:
    from baribhara.application.interfaces.events import IEventPublisher
    from baribhara.application.interfaces.repositories import IResourceRepository
    from baribhara.infrastructure.cache.cache_protocol import CacheProtocol
    from baribhara.schemas.common import PaginationParams, SearchParams

logger = logging.getLogger(__name__)

Ordering = tuple[tuple[str, SortOrder], ...]


def column_values(values: Mapping[str, Any]) -> dict[str, Any]:
    """Replace enum members by their values so rows store plain strings."""
    return {k: v.value if isinstance(v, Enum) else v for k, v in values.items()}


def id_str(value: UUID | str | None) -> str | None:
    """String form of an id for event payloads (None stays None)."""
    return str(value) if value is not None else None

EntityT = TypeVar("EntityT")
ResponseT = TypeVar("ResponseT", bound=BaseModel)
SearchT = TypeVar("SearchT", bound="SearchParams")


class ResourceService(Generic[EntityT, ResponseT, SearchT]):
    """Generic directory resource service. Subclasses declare the resource specifics.

    Class attributes:
        resource_type: Cache key and topic prefix.
        response_model: Pydantic schema returned to callers and cached.
        topics: created/updated/deleted topics.
        unique_fields: Natural keys checked on create and on update of that field.
        text_fields: Columns matched by the free-text query.
        sortable_fields: Allow-list for sort_by.
        default_order: Ordering when the caller does not pass sort_by.
        secret_fields: Input fields never echoed in an event's changes.
    """

    resource_type: ClassVar[ResourceType]
    response_model: ClassVar[type[BaseModel]]
    topics: ClassVar[ResourceTopics]
    unique_fields: ClassVar[tuple[str, ...]] = ()
    text_fields: ClassVar[tuple[str, ...]] = ()
    sortable_fields: ClassVar[frozenset[str]] = frozenset({"created_at", "updated_at"})
    default_order: ClassVar[Ordering] = (("created_at", SortOrder.DESC),)
    secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        repo: IResourceRepository[EntityT],
        cache: CacheProtocol | None = None,
        publisher: IEventPublisher | None = None,
        *,
        cache_ttl: int = DEFAULT_RESOURCE_CACHE_TTL,
    ) -> None:
        self.repo = repo
        self.cache = cache
        self.publisher = publisher
        self.cache_ttl = cache_ttl

    # ---- Projection and payloads ----

    @property
    def id_field(self) -> str:
        """Name of this resource's id in event payloads (e.g. property_id)."""
        return f"{self.resource_type.value}_id"

    def to_response(self, entity: EntityT) -> ResponseT:
        """Project an entity to the response schema (no secrets)."""
        return cast("ResponseT", self.response_model.model_validate(entity))

    def _foreign_ids(self, entity: EntityT) -> dict[str, Any]:
        """Foreign ids carried by every event of this resource."""
        return {}

    def _identity_payload(self, entity: EntityT) -> dict[str, Any]:
        return {
            self.id_field: id_str(getattr(entity, "id")),
            **self._foreign_ids(entity),
        }

    def _created_payload(self, entity: EntityT) -> dict[str, Any]:
        return self._identity_payload(entity)

    def _updated_payload(
        self, entity: EntityT, changes: Mapping[str, Any]
    ) -> dict[str, Any]:
        return {**self._identity_payload(entity), "changes": dict(changes)}

    # ---- Hooks ----

    async def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        """Adjust create values after the uniqueness check (initial status, hashing)."""
        return values

    async def _prepare_update(self, changes: dict[str, Any]) -> dict[str, Any]:
        """Adjust update values after the uniqueness check, before persisting."""
        return changes

    def _filters(self, params: SearchT) -> dict[str, Any]:
        """SearchQuery keyword arguments (equals, ranges, overlaps) for search()."""
        return {}

    # ---- Cache and events ----

    def cache_key(self, entity_id: UUID | str) -> str:
        return resource_key(self.resource_type, entity_id)

    async def _store(self, response: ResponseT) -> None:
        if self.cache is None:
            return
        key = self.cache_key(getattr(response, "id"))
        await self.cache.set(key, response.model_dump_json(), self.cache_ttl)

    async def _emit(self, topic: Topic, payload: Mapping[str, Any]) -> None:
        if self.publisher is None:
            logger.debug("Events disabled; not emitting %s", topic.value)
            return
        await self.publisher.emit(topic, payload)

    # ---- Read path ----

    async def _load(self, entity_id: UUID) -> EntityT:
        entity = await self.repo.get_by_id(entity_id)
        if entity is None:
            raise ResourceNotFoundException(self.resource_type.value, str(entity_id))
        return entity

    async def get(self, entity_id: UUID) -> ResponseT:
        """Return the resource, from cache when present.

        Raises:
            ResourceNotFoundException: If no record has this id.
        """
        if self.cache is not None:
            cached = await self.cache.get(self.cache_key(entity_id))
            if cached is not None:
                return cast("ResponseT", self.response_model.model_validate_json(cached))
        response = self.to_response(await self._load(entity_id))
        await self._store(response)
        return response

    async def get_by(self, field: str, value: Any) -> ResponseT:
        """Return the resource whose natural key field equals value (not cached)."""
        entity = await self.repo.get_by(field, value)
        if entity is None:
            raise ResourceNotFoundException(self.resource_type.value, str(value))
        return self.to_response(entity)

    # ---- Write path ----

    async def _ensure_unique(
        self, values: Mapping[str, Any], current: EntityT | None = None
    ) -> None:
        """Raise ResourceConflictException if a unique field value is taken by another record."""
        criteria: dict[str, Any] = {}
        for name in self.unique_fields:
            value = values.get(name)
            if value is None:
                continue
            if current is not None and getattr(current, name) == value:
                continue
            criteria[name] = value
        if not criteria:
            return
        exclude_id = getattr(current, "id") if current is not None else None
        existing = await self.repo.find_conflict(criteria, exclude_id=exclude_id)
        if existing is not None:
            fields = [n for n, v in criteria.items() if getattr(existing, n, None) == v]
            raise ResourceConflictException(
                self.resource_type.value, fields or list(criteria)
            )

    async def create(self, data: BaseModel) -> ResponseT:
        """Create a record, cache its response and emit "{resource}.created".

        Raises:
            ResourceConflictException: If a unique field is already taken.
        """
        values = column_values(data.model_dump())
        await self._ensure_unique(values)
        values = await self._prepare_create(values)
        entity = await self.repo.create(values)
        response = self.to_response(entity)
        await self._store(response)
        await self._emit(self.topics.created, self._created_payload(entity))
        logger.info("Created %s %s", self.resource_type.value, getattr(entity, "id"))
        return response

    async def update(self, entity_id: UUID, patch: BaseModel) -> ResponseT:
        """Merge the fields set on patch, refresh the cache and emit "{resource}.updated".

        Raises:
            ResourceNotFoundException: If no record has this id.
            ResourceConflictException: If a changed unique field is already taken.
        """
        changes = column_values(patch.model_dump(exclude_unset=True))
        event_changes = {
            k: v
            for k, v in patch.model_dump(mode="json", exclude_unset=True).items()
            if k not in self.secret_fields
        }
        entity = await self._load(entity_id)
        await self._ensure_unique(changes, current=entity)
        changes = await self._prepare_update(changes)
        entity = await self.repo.save(entity, changes)
        response = self.to_response(entity)
        await self._store(response)
        await self._emit(self.topics.updated, self._updated_payload(entity, event_changes))
        return response

    async def _transition(
        self,
        entity_id: UUID,
        topic: Topic,
        changes: Mapping[str, Any] | Callable[[EntityT], Mapping[str, Any]],
        payload_extra: Callable[[EntityT], Mapping[str, Any]] | None = None,
    ) -> None:
        """Apply a status/flag change, refresh the cache and emit topic.

        changes may be computed from the current entity. The event payload is
        the resource identity plus payload_extra, both read before the change.
        """
        entity = await self._load(entity_id)
        payload = self._identity_payload(entity)
        if payload_extra is not None:
            payload.update(payload_extra(entity))
        values = changes(entity) if callable(changes) else changes
        entity = await self.repo.save(entity, column_values(values))
        await self._store(self.to_response(entity))
        await self._emit(topic, payload)

    async def delete(self, entity_id: UUID) -> None:
        """Delete the record, drop its cache entry and emit "{resource}.deleted".

        Raises:
            ResourceNotFoundException: If no record has this id (no side effects).
        """
        affected = await self.repo.delete_by_id(entity_id)
        if not affected:
            raise ResourceNotFoundException(self.resource_type.value, str(entity_id))
        if self.cache is not None:
            await self.cache.delete(self.cache_key(entity_id))
        await self._emit(self.topics.deleted, {self.id_field: str(entity_id)})
        logger.info("Deleted %s %s", self.resource_type.value, entity_id)

    # ---- Search path ----

    def _ordering(self, sort_by: str | None, sort_order: SortOrder) -> Ordering:
        if sort_by is None:
            return self.default_order
        if sort_by not in self.sortable_fields:
            allowed = ", ".join(sorted(self.sortable_fields))
            raise ValidationException(
                f"Cannot sort {self.resource_type.value} by {sort_by!r}; allowed: {allowed}",
                field="sort_by",
            )
        return ((sort_by, sort_order),)

    def build_query(
        self,
        params: PaginationParams,
        *,
        text: str | None = None,
        order_by: Ordering | None = None,
        **filters: Any,
    ) -> SearchQuery:
        """SearchQuery for one page of params. limit is clamped to the maximum page size."""
        limit = min(params.limit, MAX_PAGE_LIMIT)
        return SearchQuery(
            text=text,
            text_fields=self.text_fields if text else (),
            order_by=order_by or self._ordering(params.sort_by, params.sort_order),
            skip=(params.page - 1) * limit,
            limit=limit,
            **filters,
        )

    async def _page(self, query: SearchQuery, page: int) -> Page[ResponseT]:
        items, total = await self.repo.search(query)
        return Page(
            items=[self.to_response(e) for e in items],
            total=total,
            page=page,
            limit=query.limit,
        )

    async def list_all(self, params: SearchParams) -> Page[ResponseT]:
        """Page through all records, optionally narrowed by the free-text query."""
        return await self._page(self.build_query(params, text=params.query), params.page)

    async def search(self, params: SearchT) -> Page[ResponseT]:
        """Page through records matching the resource's search filters."""
        query = self.build_query(params, text=params.query, **self._filters(params))
        return await self._page(query, params.page)

    async def list_where(
        self, params: PaginationParams, **equals: Any
    ) -> Page[ResponseT]:
        """Page through records whose fields equal the given values."""
        query = self.build_query(params, equals=column_values(equals))
        return await self._page(query, params.page)
