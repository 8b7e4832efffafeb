"""Core constants: cache key layout, pagination defaults.

Single source of truth for cache key structure. Resource prefixes are the
ResourceType values (user, property, tenant, caretaker).
"""

# Delimiter for composite keys ("property:<id>")
CACHE_KEY_SEP = ":"

# Observed TTL for resource cache entries (seconds); overridable via settings.
DEFAULT_RESOURCE_CACHE_TTL = 3600

# Offset pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100

# Caretaker "top rated" listing
DEFAULT_TOP_RATED_LIMIT = 10
