"""create directory tables

Revision ID: 5c3e9a1f7b24
Revises:
Create Date: 2026-10-19

users, properties, tenants and caretakers. Enum-like columns are plain
strings guarded by CHECK constraints; ids are application-generated UUIDs.
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "5c3e9a1f7b24"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _address(required: bool) -> list[sa.Column]:
    nullable = not required
    return [
        sa.Column("street", sa.String(length=255), nullable=nullable),
        sa.Column("city", sa.String(length=100), nullable=nullable),
        sa.Column("district", sa.String(length=100), nullable=nullable),
        sa.Column("division", sa.String(length=100), nullable=nullable),
        sa.Column("postal_code", sa.String(length=20), nullable=True),
    ]


def _string_array(name: str) -> sa.Column:
    return sa.Column(name, postgresql.ARRAY(sa.String()), nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("national_id", sa.String(length=50), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("is_email_verified", sa.Boolean(), nullable=False),
        sa.Column("is_phone_verified", sa.Boolean(), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("national_id"),
        sa.CheckConstraint(
            "role IN ('super_admin', 'admin', 'caretaker', 'tenant')",
            name="users_role_check",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'inactive', 'suspended', 'banned', "
            "'pending_verification')",
            name="users_status_check",
        ),
    )
    op.create_index("ix_users_phone_number", "users", ["phone_number"], unique=True)
    op.create_index("ix_users_status", "users", ["status"], unique=False)
    op.create_index("ix_users_created_at", "users", ["created_at"], unique=False)

    op.create_table(
        "properties",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        *_address(required=True),
        sa.Column("landmark", sa.String(length=255), nullable=True),
        sa.Column("rent_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("security_deposit", sa.Numeric(12, 2), nullable=False),
        sa.Column("area", sa.Numeric(10, 2), nullable=True),
        sa.Column("bedrooms", sa.Integer(), nullable=False),
        sa.Column("bathrooms", sa.Integer(), nullable=False),
        sa.Column("floor", sa.Integer(), nullable=True),
        sa.Column("total_floors", sa.Integer(), nullable=True),
        _string_array("amenities"),
        _string_array("images"),
        sa.Column("caretaker_id", sa.Uuid(), nullable=False),
        sa.Column("current_tenant_id", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('apartment', 'house', 'commercial', 'land')",
            name="properties_type_check",
        ),
        sa.CheckConstraint(
            "status IN ('available', 'occupied', 'maintenance', 'rented')",
            name="properties_status_check",
        ),
    )
    for column in (
        "type",
        "status",
        "city",
        "district",
        "caretaker_id",
        "current_tenant_id",
        "created_at",
    ):
        op.create_index(f"ix_properties_{column}", "properties", [column], unique=False)

    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("national_id", sa.String(length=50), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("emergency_contact_name", sa.String(length=255), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(length=20), nullable=True),
        sa.Column("emergency_contact_relation", sa.String(length=50), nullable=True),
        *_address(required=False),
        sa.Column("occupation", sa.String(length=100), nullable=True),
        sa.Column("employer", sa.String(length=255), nullable=True),
        sa.Column("monthly_income", sa.Numeric(12, 2), nullable=True),
        _string_array("preferences"),
        _string_array("documents"),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("current_property_id", sa.Uuid(), nullable=True),
        sa.Column("caretaker_id", sa.Uuid(), nullable=True),
        sa.Column("lease_start_date", sa.Date(), nullable=True),
        sa.Column("lease_end_date", sa.Date(), nullable=True),
        sa.Column("monthly_rent", sa.Numeric(12, 2), nullable=True),
        sa.Column("security_deposit", sa.Numeric(12, 2), nullable=True),
        sa.Column("lease_terms", sa.Text(), nullable=True),
        sa.Column("preferred_payment_method", sa.String(length=30), nullable=True),
        sa.Column("bank_account_number", sa.String(length=50), nullable=True),
        sa.Column("bank_name", sa.String(length=100), nullable=True),
        sa.Column("bkash_number", sa.String(length=20), nullable=True),
        sa.Column("nagad_number", sa.String(length=20), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_properties", sa.Integer(), nullable=False),
        sa.Column("active_leases", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('individual', 'family', 'corporate')",
            name="tenants_type_check",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'inactive', 'suspended', 'blacklisted')",
            name="tenants_status_check",
        ),
    )
    op.create_index("ix_tenants_phone_number", "tenants", ["phone_number"], unique=True)
    op.create_index("ix_tenants_user_id", "tenants", ["user_id"], unique=True)
    for column in (
        "status",
        "city",
        "district",
        "current_property_id",
        "caretaker_id",
        "created_at",
    ):
        op.create_index(f"ix_tenants_{column}", "tenants", [column], unique=False)

    op.create_table(
        "caretakers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("national_id", sa.String(length=50), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("company_name", sa.String(length=255), nullable=True),
        sa.Column("license_number", sa.String(length=100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_address(required=False),
        _string_array("specialties"),
        _string_array("languages"),
        sa.Column("rating", sa.Numeric(3, 2), nullable=False),
        sa.Column("total_properties", sa.Integer(), nullable=False),
        sa.Column("active_properties", sa.Integer(), nullable=False),
        sa.Column("total_tenants", sa.Integer(), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        _string_array("documents"),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('individual', 'company', 'agency')",
            name="caretakers_type_check",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'inactive', 'suspended')",
            name="caretakers_status_check",
        ),
    )
    op.create_index(
        "ix_caretakers_phone_number", "caretakers", ["phone_number"], unique=True
    )
    op.create_index("ix_caretakers_user_id", "caretakers", ["user_id"], unique=True)
    for column in ("status", "city", "created_at"):
        op.create_index(f"ix_caretakers_{column}", "caretakers", [column], unique=False)


def downgrade() -> None:
    op.drop_table("caretakers")
    op.drop_table("tenants")
    op.drop_table("properties")
    op.drop_table("users")
