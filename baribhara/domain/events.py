"""Domain event contract shared by publishers and consumers.

Every topic a service may emit is a Topic member; TOPIC_SCHEMAS lists the
payload fields each topic must carry. The publisher validates payloads
against this table before sending, so a producer and its consumers agree on
names through one module instead of string literals.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from baribhara.domain.enums import ResourceType
from baribhara.domain.exceptions import EventContractError

# Fields attached by the publisher; producers must not set them.
ENVELOPE_FIELDS = ("timestamp", "service")


class Topic(str, Enum):
    """Event topics (channel suffixes) for directory state changes."""

    USER_CREATED = "user.created"
    USER_UPDATED = "user.updated"
    USER_DELETED = "user.deleted"
    USER_VERIFIED = "user.verified"
    USER_SUSPENDED = "user.suspended"
    USER_ACTIVATED = "user.activated"

    PROPERTY_CREATED = "property.created"
    PROPERTY_UPDATED = "property.updated"
    PROPERTY_DELETED = "property.deleted"

    TENANT_CREATED = "tenant.created"
    TENANT_UPDATED = "tenant.updated"
    TENANT_DELETED = "tenant.deleted"
    TENANT_VERIFIED = "tenant.verified"
    TENANT_PROPERTY_ASSIGNED = "tenant.property_assigned"
    TENANT_PROPERTY_REMOVED = "tenant.property_removed"

    CARETAKER_CREATED = "caretaker.created"
    CARETAKER_UPDATED = "caretaker.updated"
    CARETAKER_DELETED = "caretaker.deleted"
    CARETAKER_VERIFIED = "caretaker.verified"
    CARETAKER_SUSPENDED = "caretaker.suspended"
    CARETAKER_ACTIVATED = "caretaker.activated"

    @property
    def resource(self) -> ResourceType:
        """Resource type that owns this topic (prefix before the dot)."""
        return ResourceType(self.value.split(".", 1)[0])


TOPIC_SCHEMAS: dict[Topic, frozenset[str]] = {
    Topic.USER_CREATED: frozenset({"user_id", "phone_number", "email"}),
    Topic.USER_UPDATED: frozenset({"user_id", "changes"}),
    Topic.USER_DELETED: frozenset({"user_id"}),
    Topic.USER_VERIFIED: frozenset({"user_id"}),
    Topic.USER_SUSPENDED: frozenset({"user_id"}),
    Topic.USER_ACTIVATED: frozenset({"user_id"}),
    Topic.PROPERTY_CREATED: frozenset({"property_id", "caretaker_id", "type"}),
    Topic.PROPERTY_UPDATED: frozenset({"property_id", "caretaker_id", "changes"}),
    Topic.PROPERTY_DELETED: frozenset({"property_id"}),
    Topic.TENANT_CREATED: frozenset({"tenant_id", "user_id", "type"}),
    Topic.TENANT_UPDATED: frozenset({"tenant_id", "user_id", "changes"}),
    Topic.TENANT_DELETED: frozenset({"tenant_id"}),
    Topic.TENANT_VERIFIED: frozenset({"tenant_id", "user_id"}),
    Topic.TENANT_PROPERTY_ASSIGNED: frozenset(
        {"tenant_id", "property_id", "caretaker_id"}
    ),
    Topic.TENANT_PROPERTY_REMOVED: frozenset({"tenant_id", "property_id"}),
    Topic.CARETAKER_CREATED: frozenset({"caretaker_id", "user_id", "type"}),
    Topic.CARETAKER_UPDATED: frozenset({"caretaker_id", "user_id", "changes"}),
    Topic.CARETAKER_DELETED: frozenset({"caretaker_id"}),
    Topic.CARETAKER_VERIFIED: frozenset({"caretaker_id", "user_id"}),
    Topic.CARETAKER_SUSPENDED: frozenset({"caretaker_id", "user_id"}),
    Topic.CARETAKER_ACTIVATED: frozenset({"caretaker_id", "user_id"}),
}


@dataclass(frozen=True)
class ResourceTopics:
    """The three CRUD topics every resource service emits."""

    created: Topic
    updated: Topic
    deleted: Topic


def validate_payload(topic: Topic, payload: Mapping[str, Any]) -> None:
    """Raise EventContractError if payload lacks a required field or sets an envelope field.

    Args:
        topic: Topic being published.
        payload: Producer payload (before envelope fields are attached).
    """
    required = TOPIC_SCHEMAS[topic]
    missing = sorted(required - payload.keys())
    if missing:
        raise EventContractError(topic.value, missing)
    reserved = [f for f in ENVELOPE_FIELDS if f in payload]
    if reserved:
        raise EventContractError(topic.value, [f"(reserved) {f}" for f in reserved])
