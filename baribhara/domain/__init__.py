"""Domain layer: enums, exceptions and the event contract.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from baribhara.domain.enums import ResourceType, SortOrder
from baribhara.domain.events import TOPIC_SCHEMAS, ResourceTopics, Topic
from baribhara.domain.exceptions import (
    AuthenticationException,
    BaribharaException,
    EventContractError,
    ResourceConflictException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "ResourceType",
    "SortOrder",
    # Events
    "TOPIC_SCHEMAS",
    "ResourceTopics",
    "Topic",
    # Exceptions
    "AuthenticationException",
    "BaribharaException",
    "EventContractError",
    "ResourceConflictException",
    "ResourceNotFoundException",
    "ValidationException",
]
