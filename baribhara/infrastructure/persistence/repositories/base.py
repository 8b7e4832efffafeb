"""Base repository: generic CRUD and SearchQuery translation for directory resources."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select, and_, delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from baribhara.application.dtos.search import SearchQuery
from baribhara.domain.enums import ResourceType, SortOrder
from baribhara.domain.exceptions import ResourceConflictException, ValidationException
from baribhara.infrastructure.persistence.database import Base

# SQLSTATE unique_violation; other integrity errors (NOT NULL, CHECK) are not conflicts.
UNIQUE_VIOLATION = "23505"


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _sqlstate(error: IntegrityError) -> str | None:
    """SQLSTATE of the driver error behind an IntegrityError, if it carries one."""
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    return None

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, find_conflict, create, save, delete_by_id, search.

    Writes are committed before returning so callers can refresh caches and
    publish events against durable state. Subclasses set resource_type and
    unique_fields.
    """

    resource_type: ResourceType
    unique_fields: tuple[str, ...] = ()

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _column(self, name: str) -> Any:
        column = getattr(self.model, name, None)
        if column is None:
            raise ValidationException(f"Unknown field: {name}", field=name)
        return column

    async def get_by_id(self, entity_id: UUID) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_by(self, field: str, value: Any) -> ModelType | None:
        """Return the first record whose field equals value, or None."""
        result = await self.db.execute(
            select(self.model).where(self._column(field) == value).limit(1)
        )
        return result.scalar_one_or_none()

    async def find_conflict(
        self, criteria: Mapping[str, Any], exclude_id: UUID | None = None
    ) -> ModelType | None:
        """Return a record matching any of criteria (OR), excluding exclude_id."""
        if not criteria:
            return None
        model: Any = self.model
        stmt = select(self.model).where(
            or_(*(self._column(f) == v for f, v in criteria.items()))
        )
        if exclude_id is not None:
            stmt = stmt.where(model.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def create(self, data: Mapping[str, Any]) -> ModelType:
        """Insert a new record from data and commit.

        Raises:
            ResourceConflictException: If a unique index rejects the insert.
            ValidationException: If another constraint (NOT NULL, CHECK) rejects it.
        """
        obj = self.model(**data)
        self.db.add(obj)
        await self._commit()
        await self.db.refresh(obj)
        return obj

    async def save(self, obj: ModelType, changes: Mapping[str, Any]) -> ModelType:
        """Apply changes to obj and commit (last write wins)."""
        for key, value in changes.items():
            setattr(obj, key, value)
        await self._commit()
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, entity_id: UUID) -> int:
        """Delete by primary key and commit. Returns the number of rows deleted."""
        model: Any = self.model
        result = await self.db.execute(delete(self.model).where(model.id == entity_id))
        await self.db.commit()
        return result.rowcount or 0

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if _sqlstate(e) == UNIQUE_VIOLATION:
                raise ResourceConflictException(
                    self.resource_type.value, list(self.unique_fields)
                ) from e
            raise ValidationException(
                f"{self.resource_type.value} violates a database constraint"
            ) from e

    def _conditions(self, query: SearchQuery) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        for name, value in query.equals.items():
            column = self._column(name)
            conditions.append(column.is_(None) if value is None else column == value)
        for name, bounds in query.ranges.items():
            column = self._column(name)
            if bounds.minimum is not None:
                conditions.append(column >= bounds.minimum)
            if bounds.maximum is not None:
                conditions.append(column <= bounds.maximum)
        for name, values in query.overlaps.items():
            if values:
                conditions.append(self._column(name).overlap(values))
        if query.text and query.text_fields:
            pattern = f"%{_escape_like(query.text)}%"
            conditions.append(
                or_(
                    *(
                        self._column(f).ilike(pattern, escape="\\")
                        for f in query.text_fields
                    )
                )
            )
        return conditions

    def _ordered(self, stmt: Select[Any], query: SearchQuery) -> Select[Any]:
        model: Any = self.model
        for name, order in query.order_by:
            column = self._column(name)
            stmt = stmt.order_by(
                column.asc() if order == SortOrder.ASC else column.desc()
            )
        return stmt.order_by(model.id.asc())

    async def search(self, query: SearchQuery) -> tuple[list[ModelType], int]:
        """Return (items for the window, total matching rows)."""
        conditions = self._conditions(query)
        where = and_(*conditions) if conditions else None

        count_stmt = select(func.count()).select_from(self.model)
        items_stmt = select(self.model)
        if where is not None:
            count_stmt = count_stmt.where(where)
            items_stmt = items_stmt.where(where)
        total = (await self.db.execute(count_stmt)).scalar_one()

        items_stmt = self._ordered(items_stmt, query).offset(query.skip).limit(query.limit)
        result = await self.db.execute(items_stmt)
        return list(result.scalars().all()), int(total)
