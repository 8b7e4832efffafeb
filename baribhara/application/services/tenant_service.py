"""Tenant service: read-through cache and events for tenants, plus property assignment."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from baribhara.application.dtos.search import Page
from baribhara.application.services.resource_service import ResourceService, id_str
from baribhara.domain.enums import ResourceType, TenantStatus
from baribhara.domain.events import ResourceTopics, Topic
from baribhara.infrastructure.persistence.models.tenant import Tenant
from baribhara.schemas.tenant import (
    TenantAssignProperty,
    TenantResponse,
    TenantSearchParams,
)
from baribhara.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from baribhara.schemas.common import PaginationParams

_LEASE_FIELDS = (
    "current_property_id",
    "caretaker_id",
    "lease_start_date",
    "lease_end_date",
    "monthly_rent",
    "security_deposit",
    "lease_terms",
)


class TenantService(ResourceService[Tenant, TenantResponse, TenantSearchParams]):
    """Tenants. user_id and phone_number are unique."""

    resource_type = ResourceType.TENANT
    response_model = TenantResponse
    topics = ResourceTopics(
        created=Topic.TENANT_CREATED,
        updated=Topic.TENANT_UPDATED,
        deleted=Topic.TENANT_DELETED,
    )
    unique_fields = ("user_id", "phone_number")
    text_fields = ("name", "phone_number", "email")
    sortable_fields = frozenset(
        {"created_at", "updated_at", "name", "lease_end_date", "monthly_rent"}
    )

    def _foreign_ids(self, entity: Tenant) -> dict[str, Any]:
        return {"user_id": id_str(entity.user_id)}

    def _created_payload(self, entity: Tenant) -> dict[str, Any]:
        return {**self._identity_payload(entity), "type": entity.type}

    async def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            **values,
            "status": TenantStatus.ACTIVE.value,
            "is_verified": False,
            "verified_at": None,
        }

    def _filters(self, params: TenantSearchParams) -> dict[str, Any]:
        equals: dict[str, Any] = {}
        if params.city:
            equals["city"] = params.city
        if params.district:
            equals["district"] = params.district
        if params.type:
            equals["type"] = params.type.value
        if params.status:
            equals["status"] = params.status.value
        return {"equals": equals}

    async def verify(self, tenant_id: UUID) -> None:
        """Mark the tenant verified and emit tenant.verified."""
        await self._transition(
            tenant_id,
            Topic.TENANT_VERIFIED,
            {"is_verified": True, "verified_at": utc_now()},
        )

    async def assign_property(self, tenant_id: UUID, body: TenantAssignProperty) -> None:
        """Record the lease on the tenant and emit tenant.property_assigned.

        The property itself is updated by the event consumer.
        """
        await self._transition(
            tenant_id,
            Topic.TENANT_PROPERTY_ASSIGNED,
            {
                "current_property_id": body.property_id,
                "caretaker_id": body.caretaker_id,
                "lease_start_date": body.lease_start_date,
                "lease_end_date": body.lease_end_date,
                "monthly_rent": body.monthly_rent,
                "security_deposit": body.security_deposit,
                "lease_terms": body.lease_terms,
                "active_leases": 1,
            },
            payload_extra=lambda _tenant: {
                "property_id": str(body.property_id),
                "caretaker_id": str(body.caretaker_id),
            },
        )

    async def remove_property(self, tenant_id: UUID) -> None:
        """Clear the lease and emit tenant.property_removed with the previous property id."""
        await self._transition(
            tenant_id,
            Topic.TENANT_PROPERTY_REMOVED,
            {**dict.fromkeys(_LEASE_FIELDS), "active_leases": 0},
            payload_extra=lambda tenant: {
                "property_id": id_str(tenant.current_property_id)
            },
        )

    async def get_by_user(self, user_id: UUID) -> TenantResponse:
        """Tenant profile of a user account."""
        return await self.get_by("user_id", user_id)

    async def list_by_property(
        self, property_id: UUID, params: PaginationParams
    ) -> Page[TenantResponse]:
        return await self.list_where(params, current_property_id=property_id)

    async def list_by_caretaker(
        self, caretaker_id: UUID, params: PaginationParams
    ) -> Page[TenantResponse]:
        return await self.list_where(params, caretaker_id=caretaker_id)

    async def list_verified(self, params: PaginationParams) -> Page[TenantResponse]:
        """Verified, active tenants."""
        return await self.list_where(
            params, is_verified=True, status=TenantStatus.ACTIVE
        )
