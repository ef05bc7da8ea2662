"""Scheduling schema - doctors, slots and patients.

Revision ID: 001_scheduling_schema
Revises: None
Create Date: 2025-03-01

Creates:
- doctors: read-only copy of doctor accounts referenced by slots
- slots: generated appointment windows with availability status
- patients: bookings, at most one per slot (unique slot_id)
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_scheduling_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

slot_status = postgresql.ENUM("available", "booked", name="slot_status", create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("NOW()")),
    ]


def upgrade() -> None:
    """Create scheduling tables."""

    # ==========================================================================
    # 1. doctors
    # ==========================================================================
    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("full_name", sa.String(150), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("specialization", sa.String(100), nullable=True),
        sa.Column("qualification", sa.String(150), nullable=True),
        sa.Column("experience", sa.Integer(), nullable=True),
        sa.Column("phone_number", sa.String(15), nullable=True),
        sa.Column("gender", sa.String(10), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("clinic_name", sa.String(150), nullable=True),
        sa.Column("open_time", sa.Time(), nullable=True),
        sa.Column("close_time", sa.Time(), nullable=True),
        sa.Column("is_enabled", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_doctors_id", "doctors", ["id"])
    op.create_index("ix_doctors_email", "doctors", ["email"], unique=True)

    # ==========================================================================
    # 2. slots
    # ==========================================================================
    slot_status.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "slots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("doctor_id", sa.Integer(), nullable=False),
        sa.Column("slot_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("slot_range", sa.String(50), nullable=False),
        sa.Column("status", slot_status, nullable=False, server_default="available"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.id"]),
    )
    op.create_index("ix_slots_id", "slots", ["id"])
    op.create_index("ix_slots_slot_date", "slots", ["slot_date"])
    op.create_index("ix_slots_doctor_id_slot_date", "slots", ["doctor_id", "slot_date"])

    # ==========================================================================
    # 3. patients
    # ==========================================================================
    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("phone_number", sa.String(10), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("aadhar_number", sa.String(12), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("appointment_at", sa.DateTime(), nullable=True),
        sa.Column("role_id", sa.Integer(), nullable=True),
        sa.Column("doctor_id", sa.Integer(), nullable=False),
        sa.Column("slot_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.id"]),
        sa.ForeignKeyConstraint(["slot_id"], ["slots.id"]),
        sa.UniqueConstraint("slot_id", name="uq_patients_slot_id"),
    )
    op.create_index("ix_patients_id", "patients", ["id"])
    op.create_index("ix_patients_phone_number", "patients", ["phone_number"])
    op.create_index("ix_patients_appointment_at", "patients", ["appointment_at"])
    op.create_index("ix_patients_doctor_id", "patients", ["doctor_id"])


def downgrade() -> None:
    """Drop scheduling tables."""
    op.drop_index("ix_patients_doctor_id", table_name="patients")
    op.drop_index("ix_patients_appointment_at", table_name="patients")
    op.drop_index("ix_patients_phone_number", table_name="patients")
    op.drop_index("ix_patients_id", table_name="patients")
    op.drop_table("patients")

    op.drop_index("ix_slots_doctor_id_slot_date", table_name="slots")
    op.drop_index("ix_slots_slot_date", table_name="slots")
    op.drop_index("ix_slots_id", table_name="slots")
    op.drop_table("slots")
    slot_status.drop(op.get_bind(), checkfirst=True)

    op.drop_index("ix_doctors_email", table_name="doctors")
    op.drop_index("ix_doctors_id", table_name="doctors")
    op.drop_table("doctors")
