"""Security: bearer token verification and password hashing."""

from baribhara.infrastructure.security.jwt import (
    Principal,
    create_access_token,
    verify_token,
)
from baribhara.infrastructure.security.password import (
    get_password_hash,
    hash_password,
    verify_password,
)

__all__ = [
    "Principal",
    "create_access_token",
    "get_password_hash",
    "hash_password",
    "verify_password",
    "verify_token",
]
