"""Property ORM model (a rentable unit managed by a caretaker)."""

import uuid
from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from baribhara.domain.enums import PropertyStatus, PropertyType
from baribhara.infrastructure.persistence.database import Base
from baribhara.infrastructure.persistence.models.mixins import DirectoryModel, enum_check


class Property(DirectoryModel, Base):
    """Property listing. Table: properties. New rows start as available."""

    __tablename__ = "properties"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PropertyStatus.AVAILABLE.value, index=True
    )

    # Address
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    district: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    division: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    landmark: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Details
    rent_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    security_deposit: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0")
    )
    area: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    floor: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_floors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    amenities: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    images: Mapped[list[str]] = mapped_column(ARRAY(String), nullable=False, default=list)

    caretaker_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    current_tenant_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, nullable=True, index=True
    )

    __table_args__ = (
        enum_check("type", PropertyType, "properties_type_check"),
        enum_check("status", PropertyStatus, "properties_status_check"),
    )
