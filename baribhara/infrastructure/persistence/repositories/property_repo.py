"""Property repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from baribhara.domain.enums import ResourceType
from baribhara.infrastructure.persistence.models.property import Property
from baribhara.infrastructure.persistence.repositories.base import BaseRepository


class PropertyRepository(BaseRepository[Property]):
    resource_type = ResourceType.PROPERTY

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Property)
