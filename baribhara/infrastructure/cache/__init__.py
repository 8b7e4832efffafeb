"""Cache: Redis service and cache key utilities.

Used by the resource services for read-through caching. CacheService uses
baribhara.core.config; key format is in keys.py (DRY).
"""

from baribhara.infrastructure.cache.cache_protocol import CacheProtocol
from baribhara.infrastructure.cache.keys import resource_key
from baribhara.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "resource_key",
]
