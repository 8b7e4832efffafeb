"""JWT bearer token creation and verification.

Tokens are issued by the auth service; this module verifies them (HS256,
shared secret) and exposes create_access_token for service-to-service calls
and tests.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from baribhara.core.config import get_settings
from baribhara.shared.utils.datetime import utc_now


@dataclass(frozen=True)
class Principal:
    """Authenticated caller resolved from a bearer token."""

    subject: str
    role: str | None = None


def create_access_token(
    subject: str,
    *,
    role: str | None = None,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed access token for subject.

    Args:
        subject: Value of the sub claim (user id).
        role: Optional role claim.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
        extra_claims: Additional claims merged into the payload.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {**(extra_claims or {}), "sub": subject, "exp": utc_now() + ttl}
    if role is not None:
        claims["role"] = role
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> Principal:
    """Verify a JWT and return the principal it names.

    Enforces presence of exp and sub.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    subject = payload.get("sub")
    if not subject:
        raise ValueError("Token missing required claim: sub")
    role = payload.get("role")
    return Principal(subject=str(subject), role=str(role) if role else None)
