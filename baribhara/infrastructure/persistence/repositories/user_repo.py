"""User repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from baribhara.domain.enums import ResourceType
from baribhara.infrastructure.persistence.models.user import User
from baribhara.infrastructure.persistence.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    resource_type = ResourceType.USER
    unique_fields = ("phone_number", "email", "national_id")

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)
