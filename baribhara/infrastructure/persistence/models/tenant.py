"""Tenant ORM model (a renter, optionally assigned to one property)."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Boolean, Date, DateTime, Integer, Numeric, String, Text, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from baribhara.domain.enums import TenantStatus, TenantType
from baribhara.infrastructure.persistence.database import Base
from baribhara.infrastructure.persistence.models.mixins import DirectoryModel, enum_check


class Tenant(DirectoryModel, Base):
    """Tenant profile. Table: tenants. user_id and phone_number are unique."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    national_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TenantType.INDIVIDUAL.value
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TenantStatus.ACTIVE.value, index=True
    )

    # Emergency contact
    emergency_contact_name: Mapped[str | None] = mapped_column(String(255))
    emergency_contact_phone: Mapped[str | None] = mapped_column(String(20))
    emergency_contact_relation: Mapped[str | None] = mapped_column(String(50))

    # Address
    street: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(100), index=True)
    district: Mapped[str | None] = mapped_column(String(100), index=True)
    division: Mapped[str | None] = mapped_column(String(100))
    postal_code: Mapped[str | None] = mapped_column(String(20))

    occupation: Mapped[str | None] = mapped_column(String(100))
    employer: Mapped[str | None] = mapped_column(String(255))
    monthly_income: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    preferences: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    documents: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, unique=True, nullable=False, index=True
    )
    current_property_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    caretaker_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)

    # Lease
    lease_start_date: Mapped[date | None] = mapped_column(Date)
    lease_end_date: Mapped[date | None] = mapped_column(Date)
    monthly_rent: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    security_deposit: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    lease_terms: Mapped[str | None] = mapped_column(Text)

    # Payment
    preferred_payment_method: Mapped[str | None] = mapped_column(String(30))
    bank_account_number: Mapped[str | None] = mapped_column(String(50))
    bank_name: Mapped[str | None] = mapped_column(String(100))
    bkash_number: Mapped[str | None] = mapped_column(String(20))
    nagad_number: Mapped[str | None] = mapped_column(String(20))

    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    total_properties: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active_leases: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        enum_check("type", TenantType, "tenants_type_check"),
        enum_check("status", TenantStatus, "tenants_status_check"),
    )
