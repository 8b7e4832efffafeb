"""TenantService: verification and property assignment transitions."""

import uuid
from datetime import date
from decimal import Decimal

import pytest

from baribhara.application.services import TenantService
from baribhara.domain.events import Topic
from baribhara.domain.exceptions import ResourceConflictException, ResourceNotFoundException
from baribhara.schemas.common import PaginationParams
from baribhara.schemas.tenant import (
    TenantAssignProperty,
    TenantCreate,
    TenantSearchParams,
    TenantUpdate,
)
from tests.fakes import FakeCache, RecordingPublisher


def _create(phone: str = "+8801811000000", user_id: uuid.UUID | None = None) -> TenantCreate:
    return TenantCreate(
        name="Nusrat",
        phone_number=phone,
        user_id=user_id or uuid.uuid4(),
        city="Dhaka",
    )


def _lease(property_id: uuid.UUID, caretaker_id: uuid.UUID) -> TenantAssignProperty:
    return TenantAssignProperty(
        property_id=property_id,
        caretaker_id=caretaker_id,
        lease_start_date=date(2026, 1, 1),
        lease_end_date=date(2026, 12, 31),
        monthly_rent=Decimal("15000"),
    )


async def test_create_starts_active_and_unverified(
    tenant_service: TenantService, publisher: RecordingPublisher
) -> None:
    tenant = await tenant_service.create(_create())
    assert tenant.status == "active"
    assert tenant.is_verified is False
    assert publisher.last(Topic.TENANT_CREATED)["user_id"] == str(tenant.user_id)


async def test_user_id_is_unique(tenant_service: TenantService) -> None:
    user_id = uuid.uuid4()
    await tenant_service.create(_create(phone="+8801811000001", user_id=user_id))
    with pytest.raises(ResourceConflictException) as exc_info:
        await tenant_service.create(_create(phone="+8801811000002", user_id=user_id))
    assert exc_info.value.details["fields"] == ["user_id"]


async def test_verify_sets_flag_and_refreshes_cache(
    tenant_service: TenantService, cache: FakeCache, publisher: RecordingPublisher
) -> None:
    tenant = await tenant_service.create(_create())
    await tenant_service.get(tenant.id)

    result = await tenant_service.verify(tenant.id)

    assert result is None
    cached = await tenant_service.get(tenant.id)
    assert cached.is_verified is True
    assert cached.verified_at is not None
    assert publisher.last(Topic.TENANT_VERIFIED) == {
        "tenant_id": str(tenant.id),
        "user_id": str(tenant.user_id),
    }


async def test_assign_property_records_lease_and_emits(
    tenant_service: TenantService, publisher: RecordingPublisher
) -> None:
    tenant = await tenant_service.create(_create())
    property_id, caretaker_id = uuid.uuid4(), uuid.uuid4()

    await tenant_service.assign_property(tenant.id, _lease(property_id, caretaker_id))

    fetched = await tenant_service.get(tenant.id)
    assert fetched.current_property_id == property_id
    assert fetched.caretaker_id == caretaker_id
    assert fetched.monthly_rent == Decimal("15000")
    assert fetched.active_leases == 1
    payload = publisher.last(Topic.TENANT_PROPERTY_ASSIGNED)
    assert payload["property_id"] == str(property_id)
    assert payload["caretaker_id"] == str(caretaker_id)
    assert payload["tenant_id"] == str(tenant.id)


async def test_remove_property_clears_lease_and_reports_previous_property(
    tenant_service: TenantService, publisher: RecordingPublisher
) -> None:
    tenant = await tenant_service.create(_create())
    property_id = uuid.uuid4()
    await tenant_service.assign_property(tenant.id, _lease(property_id, uuid.uuid4()))

    await tenant_service.remove_property(tenant.id)

    fetched = await tenant_service.get(tenant.id)
    assert fetched.current_property_id is None
    assert fetched.lease_start_date is None
    assert fetched.active_leases == 0
    assert publisher.last(Topic.TENANT_PROPERTY_REMOVED)["property_id"] == str(property_id)


async def test_transition_on_unknown_tenant_raises(tenant_service: TenantService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await tenant_service.verify(uuid.uuid4())


def test_lease_end_before_start_is_invalid() -> None:
    with pytest.raises(ValueError):
        TenantAssignProperty(
            property_id=uuid.uuid4(),
            caretaker_id=uuid.uuid4(),
            lease_start_date=date(2026, 5, 1),
            lease_end_date=date(2026, 4, 30),
            monthly_rent=Decimal("1"),
        )


async def test_get_by_user_and_listings(tenant_service: TenantService) -> None:
    user_id = uuid.uuid4()
    tenant = await tenant_service.create(_create(phone="+8801811000010", user_id=user_id))
    other = await tenant_service.create(_create(phone="+8801811000011"))
    property_id, caretaker_id = uuid.uuid4(), uuid.uuid4()
    await tenant_service.assign_property(tenant.id, _lease(property_id, caretaker_id))
    await tenant_service.verify(other.id)

    assert (await tenant_service.get_by_user(user_id)).id == tenant.id
    by_property = await tenant_service.list_by_property(property_id, PaginationParams())
    by_caretaker = await tenant_service.list_by_caretaker(caretaker_id, PaginationParams())
    verified = await tenant_service.list_verified(PaginationParams())
    assert [t.id for t in by_property.items] == [tenant.id]
    assert [t.id for t in by_caretaker.items] == [tenant.id]
    assert [t.id for t in verified.items] == [other.id]


async def test_get_by_user_unknown_raises(tenant_service: TenantService) -> None:
    with pytest.raises(ResourceNotFoundException):
        await tenant_service.get_by_user(uuid.uuid4())


async def test_search_by_status_and_text(tenant_service: TenantService) -> None:
    tenant = await tenant_service.create(_create(phone="+8801811000020"))
    await tenant_service.create(_create(phone="+8801811000021"))
    await tenant_service.update(tenant.id, TenantUpdate(status="suspended"))

    suspended = await tenant_service.search(TenantSearchParams(status="suspended"))
    by_phone = await tenant_service.search(TenantSearchParams(query="000021"))

    assert [t.id for t in suspended.items] == [tenant.id]
    assert by_phone.total == 1
