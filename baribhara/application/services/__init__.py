"""Application services: one cached, event-emitting service per directory resource."""

from baribhara.application.services.caretaker_service import CaretakerService
from baribhara.application.services.property_service import PropertyService
from baribhara.application.services.resource_service import ResourceService
from baribhara.application.services.tenant_service import TenantService
from baribhara.application.services.user_service import UserService

__all__ = [
    "CaretakerService",
    "PropertyService",
    "ResourceService",
    "TenantService",
    "UserService",
]
