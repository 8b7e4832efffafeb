"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Resource
routes require a bearer JWT; health is open.
"""

from fastapi import APIRouter, Depends

from baribhara.api.v1.dependencies import get_current_principal
from baribhara.api.v1.endpoints import caretakers, health, properties, tenants, users

api_router = APIRouter()

_authenticated = [Depends(get_current_principal)]

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    users.router, prefix="/users", tags=["users"], dependencies=_authenticated
)
api_router.include_router(
    properties.router,
    prefix="/properties",
    tags=["properties"],
    dependencies=_authenticated,
)
api_router.include_router(
    tenants.router, prefix="/tenants", tags=["tenants"], dependencies=_authenticated
)
api_router.include_router(
    caretakers.router,
    prefix="/caretakers",
    tags=["caretakers"],
    dependencies=_authenticated,
)
