"""Tests for domain exceptions (error_code, message, details, envelope)."""

from baribhara.domain.exceptions import (
    AuthenticationException,
    BaribharaException,
    ResourceConflictException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base BaribharaException uses class name as error_code when not provided."""
    exc = BaribharaException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "BaribharaException"
    assert exc.details == {}


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="sort_by")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "sort_by"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Bad").details == {}


def test_not_found() -> None:
    exc = ResourceNotFoundException("property", "p1")
    assert exc.message == "property not found: p1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "property", "resource_id": "p1"}


def test_conflict_names_fields() -> None:
    exc = ResourceConflictException("user", ["phone_number", "email"])
    assert exc.message == "user with this phone_number, email already exists"
    assert exc.error_code == "RESOURCE_CONFLICT"


def test_authentication_and_sql_not_configured_codes() -> None:
    assert AuthenticationException().error_code == "AUTHENTICATION_ERROR"
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_to_dict_envelope() -> None:
    body = ResourceNotFoundException("tenant", "t1").to_dict()
    assert body == {
        "success": False,
        "message": "tenant not found: t1",
        "error_code": "RESOURCE_NOT_FOUND",
        "errors": ["resource_type: tenant", "resource_id: t1"],
    }
