"""Persistence models: ORM entities and mixins."""

from baribhara.infrastructure.persistence.models.caretaker import Caretaker
from baribhara.infrastructure.persistence.models.mixins import (
    DirectoryModel,
    TimestampMixin,
    UuidMixin,
    enum_check,
)
from baribhara.infrastructure.persistence.models.property import Property
from baribhara.infrastructure.persistence.models.tenant import Tenant
from baribhara.infrastructure.persistence.models.user import User

__all__ = [
    "Caretaker",
    "DirectoryModel",
    "Property",
    "Tenant",
    "TimestampMixin",
    "User",
    "UuidMixin",
    "enum_check",
]
