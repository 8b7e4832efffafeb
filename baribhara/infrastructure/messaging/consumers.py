"""Background consumer reacting to tenant assignment events.

Keeps Property in step with Tenant without a synchronous call between the
services: tenant.property_assigned marks the property occupied with the
tenant as current_tenant_id; tenant.property_removed makes it available
again. Both go through PropertyService.update so the property's own cache
refresh and property.updated event still happen.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from typing import Any
from uuid import UUID

from baribhara.application.services.property_service import PropertyService
from baribhara.domain.enums import PropertyStatus
from baribhara.domain.events import Topic
from baribhara.domain.exceptions import ResourceNotFoundException
from baribhara.infrastructure.messaging.event_publisher import RedisEventSubscriber
from baribhara.schemas.property import PropertyUpdate

logger = logging.getLogger(__name__)

CONSUMED_TOPICS = [Topic.TENANT_PROPERTY_ASSIGNED, Topic.TENANT_PROPERTY_REMOVED]

PropertyServiceScope = Callable[[], AbstractAsyncContextManager[PropertyService]]


def _uuid(payload: Mapping[str, Any], field: str) -> UUID | None:
    value = payload.get(field)
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        logger.warning("Ignoring event with malformed %s: %r", field, value)
        return None


async def handle_tenant_event(
    topic: Topic, payload: Mapping[str, Any], properties: PropertyService
) -> bool:
    """Apply one tenant assignment event to its property. Returns True if a property was updated."""
    property_id = _uuid(payload, "property_id")
    if property_id is None:
        logger.debug("No property on %s event; nothing to update", topic.value)
        return False

    if topic == Topic.TENANT_PROPERTY_ASSIGNED:
        tenant_id = _uuid(payload, "tenant_id")
        if tenant_id is None:
            return False
        patch = PropertyUpdate(
            status=PropertyStatus.OCCUPIED, current_tenant_id=tenant_id
        )
    elif topic == Topic.TENANT_PROPERTY_REMOVED:
        patch = PropertyUpdate(
            status=PropertyStatus.AVAILABLE, current_tenant_id=None
        )
    else:
        return False

    try:
        await properties.update(property_id, patch)
    except ResourceNotFoundException:
        logger.warning("%s references unknown property %s", topic.value, property_id)
        return False
    logger.info("Property %s updated from %s", property_id, topic.value)
    return True


async def consume_tenant_events(
    subscriber: RedisEventSubscriber, property_scope: PropertyServiceScope
) -> None:
    """Process tenant assignment events until cancelled.

    property_scope opens a PropertyService (with its own DB session) per event.
    Handler failures are logged and the loop continues.
    """
    async for topic, payload in subscriber.subscribe(CONSUMED_TOPICS):
        try:
            async with property_scope() as properties:
                await handle_tenant_event(topic, payload, properties)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Failed to handle %s event", topic.value)


async def run_event_consumer(property_scope: PropertyServiceScope) -> None:
    """Background task entry point: subscribe and consume until cancelled.

    Call as a background task from lifespan when events are enabled.
    """
    subscriber = RedisEventSubscriber()
    await subscriber.connect()
    if not subscriber.is_available():
        logger.warning("Redis not available, event consumer not started")
        return
    try:
        await consume_tenant_events(subscriber, property_scope)
    except asyncio.CancelledError:
        logger.info("Event consumer task cancelled")
    except Exception:
        logger.exception("Event consumer stopped")
    finally:
        await subscriber.disconnect()
