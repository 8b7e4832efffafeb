"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the cache and event publisher
held on app.state, bearer authentication, and one resource service per
request. Routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from baribhara.application.services import (
    CaretakerService,
    PropertyService,
    TenantService,
    UserService,
)
from baribhara.core.config import get_settings
from baribhara.domain.exceptions import AuthenticationException
from baribhara.infrastructure.cache.redis_cache import CacheService
from baribhara.infrastructure.messaging.event_publisher import RedisEventPublisher
from baribhara.infrastructure.persistence.database import get_db
from baribhara.infrastructure.persistence.repositories import (
    CaretakerRepository,
    PropertyRepository,
    TenantRepository,
    UserRepository,
)
from baribhara.infrastructure.security.jwt import Principal, verify_token

_http_bearer = HTTPBearer(auto_error=False)


# ---- Auth ----


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Principal:
    """Return the caller named by the bearer JWT; raise 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    try:
        return verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e


# ---- Infrastructure from app.state (set in lifespan) ----


def get_cache(request: Request) -> CacheService | None:
    """Resource cache, or None when Redis is disabled."""
    return getattr(request.app.state, "cache", None)


def get_event_publisher(request: Request) -> RedisEventPublisher | None:
    """Event publisher, or None when events are disabled."""
    return getattr(request.app.state, "event_publisher", None)


# ---- Resource services ----


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheService | None, Depends(get_cache)],
    publisher: Annotated[RedisEventPublisher | None, Depends(get_event_publisher)],
) -> UserService:
    return UserService(
        UserRepository(db),
        cache,
        publisher,
        cache_ttl=get_settings().cache_ttl_resources,
    )


async def get_property_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheService | None, Depends(get_cache)],
    publisher: Annotated[RedisEventPublisher | None, Depends(get_event_publisher)],
) -> PropertyService:
    return PropertyService(
        PropertyRepository(db),
        cache,
        publisher,
        cache_ttl=get_settings().cache_ttl_resources,
    )


async def get_tenant_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheService | None, Depends(get_cache)],
    publisher: Annotated[RedisEventPublisher | None, Depends(get_event_publisher)],
) -> TenantService:
    return TenantService(
        TenantRepository(db),
        cache,
        publisher,
        cache_ttl=get_settings().cache_ttl_resources,
    )


async def get_caretaker_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheService | None, Depends(get_cache)],
    publisher: Annotated[RedisEventPublisher | None, Depends(get_event_publisher)],
) -> CaretakerService:
    return CaretakerService(
        CaretakerRepository(db),
        cache,
        publisher,
        cache_ttl=get_settings().cache_ttl_resources,
    )
