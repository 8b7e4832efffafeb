"""Messaging: Redis pub/sub event publisher, subscriber and consumers."""

from baribhara.infrastructure.messaging.event_publisher import (
    RedisEventPublisher,
    RedisEventSubscriber,
)

__all__ = ["RedisEventPublisher", "RedisEventSubscriber"]
