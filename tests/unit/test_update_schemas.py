"""Partial update bodies: explicit nulls on NOT NULL columns are rejected."""

import pytest
from pydantic import BaseModel, ValidationError

from baribhara.infrastructure.persistence.models import Caretaker, Property, Tenant, User
from baribhara.schemas.caretaker import CaretakerUpdate
from baribhara.schemas.common import PartialUpdate
from baribhara.schemas.property import PropertyUpdate
from baribhara.schemas.tenant import TenantUpdate
from baribhara.schemas.user import UserUpdate

SCHEMAS = [
    (PropertyUpdate, Property),
    (TenantUpdate, Tenant),
    (UserUpdate, User),
    (CaretakerUpdate, Caretaker),
]


@pytest.mark.parametrize(("schema", "model"), SCHEMAS)
def test_not_null_fields_cover_required_columns(
    schema: type[PartialUpdate], model: type
) -> None:
    columns = model.__table__.columns
    required = {
        name for name in schema.model_fields if name in columns and not columns[name].nullable
    }
    assert required <= schema.not_null_fields


@pytest.mark.parametrize(("schema", "model"), SCHEMAS)
def test_explicit_null_on_name_is_rejected(schema: type[BaseModel], model: type) -> None:
    with pytest.raises(ValidationError, match="cannot be null: name"):
        schema.model_validate({"name": None})


def test_omitted_fields_are_not_set() -> None:
    patch = PropertyUpdate.model_validate({"bedrooms": 3})
    assert patch.model_dump(exclude_unset=True) == {"bedrooms": 3}


def test_nullable_field_may_be_cleared() -> None:
    patch = PropertyUpdate.model_validate({"current_tenant_id": None, "landmark": None})
    assert patch.model_dump(exclude_unset=True) == {
        "current_tenant_id": None,
        "landmark": None,
    }
