"""Property service: read-through cache and events for properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from baribhara.application.dtos.search import Page, Range
from baribhara.application.services.resource_service import ResourceService, id_str
from baribhara.domain.enums import PropertyStatus, ResourceType
from baribhara.domain.events import ResourceTopics, Topic
from baribhara.infrastructure.persistence.models.property import Property
from baribhara.schemas.property import PropertyResponse, PropertySearchParams

if TYPE_CHECKING:
    from baribhara.schemas.common import PaginationParams


class PropertyService(ResourceService[Property, PropertyResponse, PropertySearchParams]):
    """Properties. New rows start available; search shows available ones unless a status is given."""

    resource_type = ResourceType.PROPERTY
    response_model = PropertyResponse
    topics = ResourceTopics(
        created=Topic.PROPERTY_CREATED,
        updated=Topic.PROPERTY_UPDATED,
        deleted=Topic.PROPERTY_DELETED,
    )
    text_fields = ("name", "city", "district")
    sortable_fields = frozenset(
        {"created_at", "updated_at", "name", "city", "rent_amount", "bedrooms"}
    )

    def _foreign_ids(self, entity: Property) -> dict[str, Any]:
        return {"caretaker_id": id_str(entity.caretaker_id)}

    def _created_payload(self, entity: Property) -> dict[str, Any]:
        return {**self._identity_payload(entity), "type": entity.type}

    async def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            **values,
            "status": PropertyStatus.AVAILABLE.value,
            "current_tenant_id": None,
        }

    def _filters(self, params: PropertySearchParams) -> dict[str, Any]:
        status = params.status or PropertyStatus.AVAILABLE
        equals: dict[str, Any] = {"status": status.value}
        if params.city:
            equals["city"] = params.city
        if params.district:
            equals["district"] = params.district
        if params.type:
            equals["type"] = params.type.value
        ranges = {}
        rent = Range(params.min_rent, params.max_rent)
        if not rent.is_open():
            ranges["rent_amount"] = rent
        bedrooms = Range(params.min_bedrooms, params.max_bedrooms)
        if not bedrooms.is_open():
            ranges["bedrooms"] = bedrooms
        return {"equals": equals, "ranges": ranges}

    async def list_by_caretaker(
        self, caretaker_id: UUID, params: PaginationParams
    ) -> Page[PropertyResponse]:
        """Properties managed by a caretaker."""
        return await self.list_where(params, caretaker_id=caretaker_id)
