"""Repositories: SQLAlchemy implementations of the resource repository port."""

from baribhara.infrastructure.persistence.repositories.base import BaseRepository
from baribhara.infrastructure.persistence.repositories.caretaker_repo import (
    CaretakerRepository,
)
from baribhara.infrastructure.persistence.repositories.property_repo import (
    PropertyRepository,
)
from baribhara.infrastructure.persistence.repositories.tenant_repo import (
    TenantRepository,
)
from baribhara.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CaretakerRepository",
    "PropertyRepository",
    "TenantRepository",
    "UserRepository",
]
