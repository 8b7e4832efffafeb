"""Event publisher interface (port)."""

from collections.abc import Mapping
from typing import Any, Protocol

from baribhara.domain.events import Topic


class IEventPublisher(Protocol):
    """Protocol for emitting domain events."""

    async def emit(self, topic: Topic, payload: Mapping[str, Any]) -> None:
        """Publish payload on topic. Delivery is best effort; see RedisEventPublisher."""
        ...
