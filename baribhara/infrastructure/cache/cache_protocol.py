"""Cache protocol for the resource services (DIP)."""

from typing import Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis). Values are serialized JSON strings."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> str | None:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store value with TTL in seconds, overwriting any previous value."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key from cache. Deleting a missing key is not an error."""
        ...
