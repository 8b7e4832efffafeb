"""Caretaker service: read-through cache and events for caretakers."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from baribhara.application.dtos.search import Page, Range
from baribhara.application.services.resource_service import ResourceService, id_str
from baribhara.core.constants import DEFAULT_TOP_RATED_LIMIT, MAX_PAGE_LIMIT
from baribhara.domain.enums import CaretakerStatus, ResourceType, SortOrder
from baribhara.domain.events import ResourceTopics, Topic
from baribhara.infrastructure.persistence.models.caretaker import Caretaker
from baribhara.schemas.caretaker import CaretakerResponse, CaretakerSearchParams
from baribhara.schemas.common import PaginationParams
from baribhara.shared.utils.datetime import utc_now


class CaretakerService(ResourceService[Caretaker, CaretakerResponse, CaretakerSearchParams]):
    """Caretakers. Search shows active caretakers, best rated first."""

    resource_type = ResourceType.CARETAKER
    response_model = CaretakerResponse
    topics = ResourceTopics(
        created=Topic.CARETAKER_CREATED,
        updated=Topic.CARETAKER_UPDATED,
        deleted=Topic.CARETAKER_DELETED,
    )
    unique_fields = ("user_id", "phone_number")
    text_fields = ("name", "company_name", "city")
    sortable_fields = frozenset({"created_at", "updated_at", "name", "rating"})
    default_order = (("rating", SortOrder.DESC), ("created_at", SortOrder.DESC))

    def _foreign_ids(self, entity: Caretaker) -> dict[str, Any]:
        return {"user_id": id_str(entity.user_id)}

    def _created_payload(self, entity: Caretaker) -> dict[str, Any]:
        return {**self._identity_payload(entity), "type": entity.type}

    async def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            **values,
            "status": CaretakerStatus.ACTIVE.value,
            "is_verified": False,
            "verified_at": None,
        }

    def _filters(self, params: CaretakerSearchParams) -> dict[str, Any]:
        equals: dict[str, Any] = {"status": CaretakerStatus.ACTIVE.value}
        if params.city:
            equals["city"] = params.city
        if params.type:
            equals["type"] = params.type.value
        filters: dict[str, Any] = {"equals": equals}
        if params.specialties:
            filters["overlaps"] = {"specialties": list(params.specialties)}
        if params.min_rating is not None:
            filters["ranges"] = {"rating": Range(minimum=params.min_rating)}
        return filters

    async def verify(self, caretaker_id: UUID) -> None:
        await self._transition(
            caretaker_id,
            Topic.CARETAKER_VERIFIED,
            {"is_verified": True, "verified_at": utc_now()},
        )

    async def suspend(self, caretaker_id: UUID) -> None:
        await self._transition(
            caretaker_id, Topic.CARETAKER_SUSPENDED, {"status": CaretakerStatus.SUSPENDED}
        )

    async def activate(self, caretaker_id: UUID) -> None:
        await self._transition(
            caretaker_id, Topic.CARETAKER_ACTIVATED, {"status": CaretakerStatus.ACTIVE}
        )

    async def get_by_user(self, user_id: UUID) -> CaretakerResponse:
        """Caretaker profile of a user account."""
        return await self.get_by("user_id", user_id)

    async def list_verified(self, params: PaginationParams) -> Page[CaretakerResponse]:
        """Verified, active caretakers."""
        return await self.list_where(
            params, is_verified=True, status=CaretakerStatus.ACTIVE
        )

    async def top_rated(self, limit: int = DEFAULT_TOP_RATED_LIMIT) -> list[CaretakerResponse]:
        """Verified, active caretakers with the highest rating."""
        query = self.build_query(
            PaginationParams(page=1, limit=max(1, min(limit, MAX_PAGE_LIMIT))),
            equals={"status": CaretakerStatus.ACTIVE.value, "is_verified": True},
            order_by=(("rating", SortOrder.DESC),),
        )
        items, _ = await self.repo.search(query)
        return [self.to_response(e) for e in items]
