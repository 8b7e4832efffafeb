"""Tenant assignment events applied to properties."""

import uuid
from contextlib import asynccontextmanager
from decimal import Decimal
from unittest.mock import MagicMock

from baribhara.application.services import PropertyService
from baribhara.domain.enums import PropertyStatus, PropertyType
from baribhara.domain.events import Topic
from baribhara.infrastructure.messaging.consumers import (
    consume_tenant_events,
    handle_tenant_event,
)
from baribhara.schemas.property import PropertyCreate
from tests.fakes import RecordingPublisher


async def _property(service: PropertyService):
    return await service.create(
        PropertyCreate(
            name="Unit 4B",
            type=PropertyType.APARTMENT,
            street="Road 2",
            city="Sylhet",
            district="Sylhet",
            division="Sylhet",
            rent_amount=Decimal("12000"),
            caretaker_id=uuid.uuid4(),
        )
    )


async def test_assigned_marks_property_occupied(
    property_service: PropertyService, publisher: RecordingPublisher
) -> None:
    prop = await _property(property_service)
    tenant_id = uuid.uuid4()

    handled = await handle_tenant_event(
        Topic.TENANT_PROPERTY_ASSIGNED,
        {
            "tenant_id": str(tenant_id),
            "property_id": str(prop.id),
            "caretaker_id": str(prop.caretaker_id),
        },
        property_service,
    )

    assert handled is True
    fetched = await property_service.get(prop.id)
    assert fetched.status == PropertyStatus.OCCUPIED
    assert fetched.current_tenant_id == tenant_id
    assert publisher.last(Topic.PROPERTY_UPDATED)["changes"] == {
        "status": "occupied",
        "current_tenant_id": str(tenant_id),
    }


async def test_removed_makes_property_available(property_service: PropertyService) -> None:
    prop = await _property(property_service)
    tenant_id = uuid.uuid4()
    await handle_tenant_event(
        Topic.TENANT_PROPERTY_ASSIGNED,
        {"tenant_id": str(tenant_id), "property_id": str(prop.id), "caretaker_id": "c"},
        property_service,
    )

    await handle_tenant_event(
        Topic.TENANT_PROPERTY_REMOVED,
        {"tenant_id": str(tenant_id), "property_id": str(prop.id)},
        property_service,
    )

    fetched = await property_service.get(prop.id)
    assert fetched.status == PropertyStatus.AVAILABLE
    assert fetched.current_tenant_id is None


async def test_unknown_or_missing_property_is_ignored(
    property_service: PropertyService,
) -> None:
    assert (
        await handle_tenant_event(
            Topic.TENANT_PROPERTY_REMOVED,
            {"tenant_id": "t1", "property_id": str(uuid.uuid4())},
            property_service,
        )
        is False
    )
    assert (
        await handle_tenant_event(
            Topic.TENANT_PROPERTY_REMOVED,
            {"tenant_id": "t1", "property_id": None},
            property_service,
        )
        is False
    )
    assert (
        await handle_tenant_event(
            Topic.TENANT_PROPERTY_REMOVED,
            {"tenant_id": "t1", "property_id": "not-a-uuid"},
            property_service,
        )
        is False
    )


async def test_consumer_loop_survives_handler_failure(
    property_service: PropertyService,
) -> None:
    """A failing event is logged and the next one is still processed."""
    prop = await _property(property_service)
    events = [
        (Topic.TENANT_PROPERTY_ASSIGNED, {"property_id": str(prop.id), "tenant_id": "x"}),
        (
            Topic.TENANT_PROPERTY_ASSIGNED,
            {"property_id": str(prop.id), "tenant_id": str(uuid.uuid4())},
        ),
    ]
    calls = 0

    async def subscribe(topics):
        for event in events:
            yield event

    @asynccontextmanager
    async def scope():
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("db unavailable")
        yield property_service

    subscriber = MagicMock()
    subscriber.subscribe = subscribe

    await consume_tenant_events(subscriber, scope)

    assert (await property_service.get(prop.id)).status == PropertyStatus.OCCUPIED
