"""Caretaker repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from baribhara.domain.enums import ResourceType
from baribhara.infrastructure.persistence.models.caretaker import Caretaker
from baribhara.infrastructure.persistence.repositories.base import BaseRepository


class CaretakerRepository(BaseRepository[Caretaker]):
    resource_type = ResourceType.CARETAKER
    unique_fields = ("user_id", "phone_number")

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Caretaker)
