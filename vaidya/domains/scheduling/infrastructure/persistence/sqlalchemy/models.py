# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: SQLAlchemy models for doctors, slots and patients.
# ============================================================================
"""
Scheduling SQLAlchemy Models

Database models for scheduling domain persistence.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from vaidya.database.base import Base, TimestampMixin
from vaidya.domains.scheduling.domain.value_objects.slot_status import SlotStatus

PATIENT_SLOT_CONSTRAINT = "uq_patients_slot_id"


class DoctorModel(TimestampMixin, Base):
    """SQLAlchemy model for Doctor entity."""

    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(150), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    specialization = Column(String(100), nullable=True)
    qualification = Column(String(150), nullable=True)
    experience = Column(Integer, nullable=True)
    phone_number = Column(String(15), nullable=True)
    gender = Column(String(10), nullable=True)
    address = Column(Text, nullable=True)
    clinic_name = Column(String(150), nullable=True)
    open_time = Column(Time, nullable=True)
    close_time = Column(Time, nullable=True)
    is_enabled = Column(Boolean, default=True, nullable=False)

    slots = relationship("SlotModel", back_populates="doctor")


class SlotModel(TimestampMixin, Base):
    """SQLAlchemy model for Slot entity."""

    __tablename__ = "slots"
    __table_args__ = (Index("ix_slots_doctor_id_slot_date", "doctor_id", "slot_date"),)

    id = Column(Integer, primary_key=True, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False)
    slot_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    slot_range = Column(String(50), nullable=False)
    status = Column(
        SQLEnum(SlotStatus, name="slot_status", values_callable=lambda e: [m.value for m in e]),
        default=SlotStatus.AVAILABLE,
        nullable=False,
    )

    doctor = relationship("DoctorModel", back_populates="slots")
    patient = relationship("PatientModel", back_populates="slot", uselist=False)


class PatientModel(TimestampMixin, Base):
    """SQLAlchemy model for Patient entity."""

    __tablename__ = "patients"
    __table_args__ = (UniqueConstraint("slot_id", name=PATIENT_SLOT_CONSTRAINT),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    phone_number = Column(String(10), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    aadhar_number = Column(String(12), nullable=False)
    age = Column(Integer, nullable=True)
    address = Column(Text, nullable=True)
    appointment_at = Column(DateTime, nullable=True, index=True)
    role_id = Column(Integer, nullable=True)

    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False, index=True)
    slot_id = Column(Integer, ForeignKey("slots.id"), nullable=False)

    slot = relationship("SlotModel", back_populates="patient")
