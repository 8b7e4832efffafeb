"""Redis-based read-through cache for directory resources.

Stores the serialized response of each resource under "{resource}:{id}"
with a TTL. Integrates with baribhara.infrastructure.cache.keys for key
format (DRY).

Failure policy: if Redis cannot be reached at startup the cache is disabled
(get misses, writes are no-ops). Once connected, a failing command is retried
once after a reconnect; a second failure propagates to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import redis.asyncio as redis

from baribhara.core.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheService:
    """Async Redis cache service with TTL support.

    Uses baribhara.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI. When given,
                the service is considered connected.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        try:
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=(
                    self.settings.redis_password.get_secret_value()
                    if self.settings.redis_password
                    else None
                ),
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Drop the current client and connect again. Returns True if reconnected."""
        if self.redis is not None:
            try:
                await self.redis.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis client")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _run(self, op: str, key: str, command: Callable[[], Awaitable[T]]) -> T:
        """Run a Redis command, reconnecting once on a connection failure."""
        try:
            return await command()
        except (redis.ConnectionError, redis.TimeoutError):
            logger.warning("Cache %s lost connection for key %s; reconnecting", op, key)
            if not await self._reconnect():
                raise
            try:
                return await command()
            except redis.RedisError:
                logger.exception("Cache %s error for key %s after reconnect", op, key)
                raise
        except redis.RedisError:
            logger.exception("Cache %s error for key %s", op, key)
            raise

    async def get(self, key: str) -> str | None:
        """Return the cached string or None on a miss (or when the cache is disabled).

        Args:
            key: Cache key (use baribhara.infrastructure.cache.keys builders).
        """
        if not self.is_available():
            return None
        value = await self._run("get", key, lambda: self.redis.get(key))
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store value with TTL, overwriting any previous value.

        Args:
            key: Cache key.
            value: Serialized value (JSON string).
            ttl: Time-to-live in seconds (default settings.cache_ttl_resources).
        """
        if not self.is_available():
            return
        ttl = ttl if ttl is not None else self.settings.cache_ttl_resources
        await self._run("set", key, lambda: self.redis.setex(key, ttl, value))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def delete(self, key: str) -> None:
        """Remove key from cache. A missing key is not an error."""
        if not self.is_available():
            return
        await self._run("delete", key, lambda: self.redis.delete(key))
        logger.debug("Cache DELETE: %s", key)
