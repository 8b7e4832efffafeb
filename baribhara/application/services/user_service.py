"""User service: read-through cache and events for user accounts."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from baribhara.application.services.resource_service import ResourceService
from baribhara.domain.enums import ResourceType, UserStatus
from baribhara.domain.events import ResourceTopics, Topic
from baribhara.infrastructure.persistence.models.user import User
from baribhara.infrastructure.security.password import hash_password
from baribhara.schemas.user import UserResponse, UserSearchParams


class UserService(ResourceService[User, UserResponse, UserSearchParams]):
    """User accounts. Passwords are stored as bcrypt hashes and never leave the service."""

    resource_type = ResourceType.USER
    response_model = UserResponse
    topics = ResourceTopics(
        created=Topic.USER_CREATED,
        updated=Topic.USER_UPDATED,
        deleted=Topic.USER_DELETED,
    )
    unique_fields = ("phone_number", "email", "national_id")
    text_fields = ("name", "phone_number", "email")
    sortable_fields = frozenset({"created_at", "updated_at", "name", "last_login_at"})
    secret_fields = frozenset({"password"})

    def _created_payload(self, entity: User) -> dict[str, Any]:
        return {
            **self._identity_payload(entity),
            "phone_number": entity.phone_number,
            "email": entity.email,
        }

    async def _hash_password(self, values: dict[str, Any]) -> dict[str, Any]:
        values = dict(values)
        password = values.pop("password", None)
        if password is not None:
            values["password_hash"] = await hash_password(password)
        return values

    async def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        values = await self._hash_password(values)
        values.setdefault("password_hash", None)
        values["status"] = UserStatus.ACTIVE.value
        values["is_email_verified"] = False
        values["is_phone_verified"] = False
        return values

    async def _prepare_update(self, changes: dict[str, Any]) -> dict[str, Any]:
        return await self._hash_password(changes)

    def _filters(self, params: UserSearchParams) -> dict[str, Any]:
        equals: dict[str, Any] = {}
        if params.role:
            equals["role"] = params.role.value
        if params.status:
            equals["status"] = params.status.value
        return {"equals": equals}

    async def verify(self, user_id: UUID) -> None:
        """Mark the phone number verified; a pending account becomes active."""

        def changes(user: User) -> dict[str, Any]:
            values: dict[str, Any] = {"is_phone_verified": True}
            if user.status == UserStatus.PENDING_VERIFICATION.value:
                values["status"] = UserStatus.ACTIVE
            return values

        await self._transition(user_id, Topic.USER_VERIFIED, changes)

    async def suspend(self, user_id: UUID) -> None:
        await self._transition(user_id, Topic.USER_SUSPENDED, {"status": UserStatus.SUSPENDED})

    async def activate(self, user_id: UUID) -> None:
        await self._transition(user_id, Topic.USER_ACTIVATED, {"status": UserStatus.ACTIVE})

    async def get_by_phone_number(self, phone_number: str) -> UserResponse:
        return await self.get_by("phone_number", phone_number)

    async def get_by_email(self, email: str) -> UserResponse:
        return await self.get_by("email", email)
