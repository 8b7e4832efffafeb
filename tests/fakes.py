"""In-memory stand-ins for the repository, cache and event publisher ports.

InMemoryRepository evaluates SearchQuery the way BaseRepository translates it
to SQL, so service behaviour (uniqueness, pagination, filters) can be tested
without Postgres. Call counters let tests assert on cache hits.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID

from baribhara.application.dtos.search import SearchQuery
from baribhara.domain.enums import SortOrder
from baribhara.domain.events import Topic, validate_payload

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class InMemoryRepository:
    """Repository over a dict keyed by id, using real (transient) ORM instances."""

    def __init__(self, model: type) -> None:
        self.model = model
        self.rows: dict[UUID, Any] = {}
        self.calls: dict[str, int] = {}
        self._clock = 0

    def _count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    def _tick(self) -> datetime:
        self._clock += 1
        return _EPOCH + timedelta(seconds=self._clock)

    def _apply_defaults(self, obj: Any) -> None:
        for column in self.model.__table__.columns:
            if getattr(obj, column.key) is not None or column.default is None:
                continue
            default = column.default
            value = default.arg(None) if default.is_callable else default.arg
            setattr(obj, column.key, value)

    async def get_by_id(self, entity_id: UUID) -> Any | None:
        self._count("get_by_id")
        return self.rows.get(entity_id)

    async def get_by(self, field_name: str, value: Any) -> Any | None:
        self._count("get_by")
        return next(
            (r for r in self.rows.values() if getattr(r, field_name) == value), None
        )

    async def find_conflict(
        self, criteria: Mapping[str, Any], exclude_id: UUID | None = None
    ) -> Any | None:
        self._count("find_conflict")
        for row in self.rows.values():
            if row.id == exclude_id:
                continue
            if any(getattr(row, f) == v for f, v in criteria.items()):
                return row
        return None

    async def create(self, data: Mapping[str, Any]) -> Any:
        self._count("create")
        obj = self.model(**data)
        self._apply_defaults(obj)
        obj.created_at = obj.updated_at = self._tick()
        self.rows[obj.id] = obj
        return obj

    async def save(self, obj: Any, changes: Mapping[str, Any]) -> Any:
        self._count("save")
        for key, value in changes.items():
            setattr(obj, key, value)
        obj.updated_at = self._tick()
        return obj

    async def delete_by_id(self, entity_id: UUID) -> int:
        self._count("delete_by_id")
        return 1 if self.rows.pop(entity_id, None) is not None else 0

    def _matches(self, row: Any, query: SearchQuery) -> bool:
        for name, value in query.equals.items():
            if getattr(row, name) != value:
                return False
        for name, bounds in query.ranges.items():
            current = getattr(row, name)
            if current is None:
                return False
            if bounds.minimum is not None and current < bounds.minimum:
                return False
            if bounds.maximum is not None and current > bounds.maximum:
                return False
        for name, values in query.overlaps.items():
            if values and not set(getattr(row, name) or ()) & set(values):
                return False
        if query.text and query.text_fields:
            term = query.text.lower()
            if not any(
                term in str(getattr(row, f) or "").lower() for f in query.text_fields
            ):
                return False
        return True

    async def search(self, query: SearchQuery) -> tuple[list[Any], int]:
        self._count("search")
        items = sorted(
            (r for r in self.rows.values() if self._matches(r, query)),
            key=lambda r: str(r.id),
        )
        for name, order in reversed(query.order_by):
            items.sort(
                key=lambda r: _sort_key(getattr(r, name)),
                reverse=order == SortOrder.DESC,
            )
        return items[query.skip : query.skip + query.limit], len(items)


def _sort_key(value: Any) -> Any:
    if isinstance(value, (int, float, Decimal)):
        return Decimal(value)
    return value


class FakeCache:
    """Dict-backed CacheProtocol recording every get/set/delete."""

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.gets: list[str] = []
        self.sets: list[str] = []
        self.deletes: list[str] = []

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> str | None:
        self.gets.append(key)
        return self.store.get(key) if self.available else None

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        self.sets.append(key)
        if self.available:
            self.store[key] = value
            self.ttls[key] = ttl

    async def delete(self, key: str) -> None:
        self.deletes.append(key)
        self.store.pop(key, None)


@dataclass
class RecordingPublisher:
    """IEventPublisher that validates and records events instead of sending them."""

    events: list[tuple[Topic, dict[str, Any]]] = field(default_factory=list)

    async def emit(self, topic: Topic, payload: Mapping[str, Any]) -> None:
        validate_payload(topic, payload)
        self.events.append((topic, dict(payload)))

    def is_available(self) -> bool:
        return True

    def topics(self) -> list[Topic]:
        return [t for t, _ in self.events]

    def last(self, topic: Topic) -> dict[str, Any]:
        return next(p for t, p in reversed(self.events) if t == topic)
