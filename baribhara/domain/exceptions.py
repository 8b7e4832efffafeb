"""Domain exceptions for the Baribhara services.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class BaribharaException(Exception):
    """Base exception for all Baribhara application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as the standard error envelope (success=False)."""
        errors = [f"{k}: {v}" for k, v in self.details.items()] or None
        return {
            "success": False,
            "message": self.message,
            "error_code": self.error_code,
            "errors": errors,
        }


class ValidationException(BaribharaException):
    """Raised when input validation fails (e.g. unknown sort column)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(BaribharaException):
    """Raised when the bearer token is absent, invalid or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(BaribharaException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'property', 'tenant').
            resource_id: The ID (or natural key) that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ResourceConflictException(BaribharaException):
    """Raised when a create or update collides with a unique natural key."""

    def __init__(self, resource_type: str, fields: list[str]) -> None:
        """Initialize with resource type and the colliding field names.

        Args:
            resource_type: Type of resource (e.g. 'user').
            fields: Unique fields whose values already exist.
        """
        joined = ", ".join(fields) if fields else "unique key"
        super().__init__(
            f"{resource_type} with this {joined} already exists",
            "RESOURCE_CONFLICT",
            {"resource_type": resource_type, "fields": fields},
        )


class SqlNotConfiguredException(BaribharaException):
    """Raised when a request needs the database but no engine is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class EventContractError(ValueError):
    """Raised when an event payload does not match its topic schema.

    A programming error (wrong payload for a topic), not a runtime
    delivery failure; never mapped to an HTTP status.
    """

    def __init__(self, topic: str, missing: list[str]) -> None:
        self.topic = topic
        self.missing = missing
        super().__init__(
            f"Payload for topic {topic!r} is missing required fields: {', '.join(missing)}"
        )
