"""Caretaker ORM model (an individual or company managing properties)."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from baribhara.domain.enums import CaretakerStatus, CaretakerType
from baribhara.infrastructure.persistence.database import Base
from baribhara.infrastructure.persistence.models.mixins import DirectoryModel, enum_check


class Caretaker(DirectoryModel, Base):
    """Caretaker profile. Table: caretakers. user_id and phone_number are unique."""

    __tablename__ = "caretakers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255))
    national_id: Mapped[str | None] = mapped_column(String(50))
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CaretakerType.INDIVIDUAL.value
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CaretakerStatus.ACTIVE.value, index=True
    )

    company_name: Mapped[str | None] = mapped_column(String(255))
    license_number: Mapped[str | None] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text)

    # Address
    street: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(100), index=True)
    district: Mapped[str | None] = mapped_column(String(100))
    division: Mapped[str | None] = mapped_column(String(100))
    postal_code: Mapped[str | None] = mapped_column(String(20))

    specialties: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    languages: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    rating: Mapped[Decimal] = mapped_column(
        Numeric(3, 2), nullable=False, default=Decimal("0")
    )
    total_properties: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active_properties: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_tenants: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    documents: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, unique=True, nullable=False, index=True
    )

    __table_args__ = (
        enum_check("type", CaretakerType, "caretakers_type_check"),
        enum_check("status", CaretakerStatus, "caretakers_status_check"),
    )
