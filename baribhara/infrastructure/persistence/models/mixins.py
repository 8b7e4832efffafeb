"""SQLAlchemy mixins for common model patterns (DRY).

Provides: UuidMixin, TimestampMixin, and DirectoryModel combining both.
"""

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import CheckConstraint, DateTime, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class UuidMixin:
    """Mixin for models using an application-generated UUID primary key."""

    @declared_attr
    def id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            nullable=False,
            index=True,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class DirectoryModel(UuidMixin, TimestampMixin):
    """Combined mixin: UUID id + created_at/updated_at. Common for directory resources."""

    __abstract__ = True


def enum_check(column: str, enum_cls: type[Enum], name: str) -> CheckConstraint:
    """CHECK constraint restricting a String column to the values of enum_cls."""
    values = ", ".join(
        "'{}'".format(str(m.value).replace("'", "''")) for m in enum_cls
    )
    return CheckConstraint(f"{column} IN ({values})", name=name)
