"""Topic contract: every topic has a schema and owns its resource prefix."""

import pytest

from baribhara.domain.enums import ResourceType
from baribhara.domain.events import TOPIC_SCHEMAS, Topic, validate_payload
from baribhara.domain.exceptions import EventContractError


def test_every_topic_has_a_schema() -> None:
    assert set(TOPIC_SCHEMAS) == set(Topic)


@pytest.mark.parametrize("topic", list(Topic))
def test_every_schema_names_the_resource_id(topic: Topic) -> None:
    assert f"{topic.resource.value}_id" in TOPIC_SCHEMAS[topic]


def test_topic_resource() -> None:
    assert Topic.TENANT_PROPERTY_ASSIGNED.resource == ResourceType.TENANT
    assert Topic.CARETAKER_VERIFIED.resource == ResourceType.CARETAKER


def test_validate_payload_accepts_extra_fields() -> None:
    validate_payload(Topic.USER_DELETED, {"user_id": "u1", "reason": "gdpr"})


def test_validate_payload_lists_missing_fields() -> None:
    with pytest.raises(EventContractError) as exc_info:
        validate_payload(Topic.USER_CREATED, {"user_id": "u1"})
    assert exc_info.value.topic == "user.created"
    assert exc_info.value.missing == ["email", "phone_number"]


def test_validate_payload_rejects_timestamp() -> None:
    with pytest.raises(EventContractError):
        validate_payload(Topic.USER_DELETED, {"user_id": "u1", "timestamp": "now"})
