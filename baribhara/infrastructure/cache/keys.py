"""Cache key builders. Single place for key format (DRY).

Keys are "{resource}:{id}" (e.g. "property:3f0c..."). Key components must
not contain CACHE_KEY_SEP to avoid ambiguous or colliding keys.
"""

from uuid import UUID

from baribhara.core.constants import CACHE_KEY_SEP
from baribhara.domain.enums import ResourceType


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def resource_key(resource_type: ResourceType, resource_id: UUID | str) -> str:
    """Cache key for a directory resource by ID."""
    rid = str(resource_id)
    _validate_key_component(rid, "resource_id")
    return f"{resource_type.value}{CACHE_KEY_SEP}{rid}"
