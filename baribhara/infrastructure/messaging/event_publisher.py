"""Redis pub/sub event publisher for directory change events.

Each Topic is published on channel "{prefix}:{topic}" (e.g.
"events:property.updated") as JSON. The publisher attaches the envelope
fields timestamp (ISO-8601 UTC) and service before sending.

emit() is fire-and-forget: it validates the payload against the topic
schema, then schedules a background publish that retries with exponential
backoff (tenacity). When every attempt fails the event is dropped and logged
at ERROR. Pending publishes are drained on disconnect().
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

import redis.asyncio as redis
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from baribhara.core.config import get_settings
from baribhara.domain.events import Topic, validate_payload
from baribhara.shared.utils.datetime import utc_now_iso

logger = logging.getLogger(__name__)


class _RedisPubSubBase:
    """Shared Redis connection and channel logic for event pub/sub."""

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize. Pass redis_client for DI/testing."""
        self.redis = redis_client
        self.settings = get_settings()
        self.channel_prefix = self.settings.event_channel_prefix
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self._connected:
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
            )
            await self.redis.ping()
            self._connected = True
            logger.info("Redis pub/sub connected")
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis pub/sub connection failed: %s", e)
            self._connected = False
            self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis pub/sub disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected."""
        return self._connected and self.redis is not None

    def channel_for(self, topic: Topic) -> str:
        """Channel name for a topic."""
        return f"{self.channel_prefix}:{topic.value}"

    def topic_for(self, channel: str) -> Topic | None:
        """Inverse of channel_for; None for channels outside this prefix."""
        prefix = f"{self.channel_prefix}:"
        if not channel.startswith(prefix):
            return None
        try:
            return Topic(channel[len(prefix) :])
        except ValueError:
            return None


class RedisEventPublisher(_RedisPubSubBase):
    """Publishes domain events to Redis, one channel per topic."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        *,
        service_name: str | None = None,
        max_attempts: int | None = None,
        backoff_seconds: float | None = None,
        backoff_max_seconds: float | None = None,
    ) -> None:
        super().__init__(redis_client)
        self.service_name = service_name or self.settings.service_name
        self.max_attempts = max_attempts or self.settings.event_publish_max_attempts
        self.backoff_seconds = (
            backoff_seconds
            if backoff_seconds is not None
            else self.settings.event_publish_backoff_seconds
        )
        self.backoff_max_seconds = (
            backoff_max_seconds
            if backoff_max_seconds is not None
            else self.settings.event_publish_backoff_max_seconds
        )
        self._pending: set[asyncio.Task[bool]] = set()

    @property
    def pending_count(self) -> int:
        """Number of publishes scheduled but not yet finished."""
        return len(self._pending)

    def build_message(self, topic: Topic, payload: Mapping[str, Any]) -> str:
        """Validate payload and return the JSON message with envelope fields attached.

        Raises:
            EventContractError: If payload does not satisfy the topic schema.
        """
        validate_payload(topic, payload)
        envelope = {
            **payload,
            "timestamp": utc_now_iso(),
            "service": self.service_name,
        }
        return json.dumps(envelope, default=str)

    async def emit(self, topic: Topic, payload: Mapping[str, Any]) -> None:
        """Schedule a publish of payload on topic and return immediately.

        Args:
            topic: Event topic.
            payload: Producer payload; must carry every field the topic requires.

        Raises:
            EventContractError: If payload does not satisfy the topic schema.
        """
        message = self.build_message(topic, payload)
        task = asyncio.create_task(self.publish(topic, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def publish(self, topic: Topic, message: str) -> bool:
        """Publish an already-built message with retry. Returns False when the event is dropped."""
        channel = self.channel_for(topic)
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(
                    multiplier=self.backoff_seconds, max=self.backoff_max_seconds
                ),
                retry=retry_if_exception_type((redis.RedisError, ConnectionError)),
                before_sleep=lambda retry_state: logger.warning(
                    "Event publish to %s failed (attempt %s), retrying in %.2fs",
                    channel,
                    retry_state.attempt_number,
                    retry_state.next_action.sleep if retry_state.next_action else 0,
                ),
            ):
                with attempt:
                    await self._publish_once(channel, message)
        except RetryError as e:
            logger.error(
                "Dropped event on %s after %s attempts: %s",
                channel,
                self.max_attempts,
                e.last_attempt.exception(),
            )
            return False
        logger.debug("Published event to %s", channel)
        return True

    async def _publish_once(self, channel: str, message: str) -> None:
        if not self.is_available():
            await self.connect()
        if not self.is_available() or self.redis is None:
            raise redis.ConnectionError("Redis pub/sub is not connected")
        await self.redis.publish(channel, message)

    async def drain(self) -> None:
        """Wait for all scheduled publishes to finish."""
        if not self._pending:
            return
        logger.info("Draining %s pending event publish(es)", len(self._pending))
        await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def disconnect(self) -> None:
        """Drain pending publishes, then close the Redis connection."""
        await self.drain()
        await super().disconnect()


class RedisEventSubscriber(_RedisPubSubBase):
    """Subscribes to domain event channels.

    subscribe() uses a locally-scoped PubSub that is closed in finally, so
    concurrent subscriptions are safe.
    """

    async def subscribe(
        self, topics: list[Topic]
    ) -> AsyncIterator[tuple[Topic, dict[str, Any]]]:
        """Subscribe to topics. Yields (topic, payload) pairs as they arrive."""
        if not self.is_available() or self.redis is None:
            logger.warning("Redis not available for event subscription")
            return
        channels = [self.channel_for(t) for t in topics]
        pubsub = self.redis.pubsub()
        try:
            await pubsub.subscribe(*channels)
            logger.info("Subscribed to %s", ", ".join(channels))
            async for message in pubsub.listen():
                if message["type"] != "message":
                    continue
                topic = self.topic_for(str(message.get("channel") or ""))
                if topic is None:
                    continue
                try:
                    data = json.loads(message["data"])
                except (json.JSONDecodeError, KeyError, TypeError):
                    logger.exception("Failed to parse event message on %s", topic.value)
                    continue
                if not isinstance(data, dict):
                    logger.warning("Ignoring non-object event payload on %s", topic.value)
                    continue
                yield topic, data
        finally:
            await pubsub.unsubscribe(*channels)
            await pubsub.aclose()
            logger.info("Unsubscribed from %s", ", ".join(channels))
