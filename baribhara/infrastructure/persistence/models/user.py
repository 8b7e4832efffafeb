"""User ORM model (account identity shared by tenants and caretakers)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from baribhara.domain.enums import UserRole, UserStatus
from baribhara.infrastructure.persistence.database import Base
from baribhara.infrastructure.persistence.models.mixins import DirectoryModel, enum_check


class User(DirectoryModel, Base):
    """User account. Table: users. phone_number, email and national_id are unique."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    national_id: Mapped[str | None] = mapped_column(
        String(50), unique=True, nullable=True
    )
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.TENANT.value
    )
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, default=UserStatus.ACTIVE.value, index=True
    )
    is_email_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    is_phone_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        enum_check("role", UserRole, "users_role_check"),
        enum_check("status", UserStatus, "users_status_check"),
    )
