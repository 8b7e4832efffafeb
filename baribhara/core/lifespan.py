"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (cache, event publisher, tenant
event consumer, DB engine dispose).
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from baribhara.application.services import PropertyService
from baribhara.core.config import get_settings
from baribhara.infrastructure.persistence import database
from baribhara.infrastructure.persistence.repositories import PropertyRepository

logger = logging.getLogger(__name__)


def _property_scope(app: FastAPI):
    """Factory opening a PropertyService on its own session, for the event consumer."""
    settings = get_settings()

    @asynccontextmanager
    async def scope() -> AsyncIterator[PropertyService]:
        async with database.session_scope() as session:
            yield PropertyService(
                PropertyRepository(session),
                app.state.cache,
                app.state.event_publisher,
                cache_ttl=settings.cache_ttl_resources,
            )

    return scope


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: Redis cache (if enabled), event publisher (if enabled),
    tenant event consumer (if enabled). Shutdown runs in reverse: consumer
    cancel, publisher drain and disconnect, cache disconnect, SQL engine
    dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.redis_enabled:
        from baribhara.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    if settings.events_enabled:
        from baribhara.infrastructure.messaging.event_publisher import (
            RedisEventPublisher,
        )

        publisher = RedisEventPublisher()
        await publisher.connect()
        app.state.event_publisher = publisher
    else:
        app.state.event_publisher = None

    if settings.events_enabled and settings.event_consumer_enabled:
        from baribhara.infrastructure.messaging.consumers import run_event_consumer

        app.state.event_consumer_task = asyncio.create_task(
            run_event_consumer(_property_scope(app))
        )
    else:
        app.state.event_consumer_task = None

    yield

    # ---- Shutdown ----
    consumer_task = getattr(app.state, "event_consumer_task", None)
    if consumer_task is not None:
        consumer_task.cancel()
        try:
            await consumer_task
        except asyncio.CancelledError:
            pass
        logger.info("Event consumer task stopped")

    if getattr(app.state, "event_publisher", None) is not None:
        await app.state.event_publisher.disconnect()
        logger.info("Event publisher disconnected")

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    await database.dispose_engine()
