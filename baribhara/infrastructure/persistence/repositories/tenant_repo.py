"""Tenant repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from baribhara.domain.enums import ResourceType
from baribhara.infrastructure.persistence.models.tenant import Tenant
from baribhara.infrastructure.persistence.repositories.base import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    resource_type = ResourceType.TENANT
    unique_fields = ("user_id", "phone_number")

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Tenant)
