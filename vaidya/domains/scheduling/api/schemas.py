"""
Scheduling API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field

from vaidya.domains.scheduling.domain.entities import Doctor, Patient, Slot


class SlotCreateRequest(BaseModel):
    """Slot generation request schema."""

    model_config = ConfigDict(populate_by_name=True)

    doctor_id: int
    slot_date: date = Field(alias="date")
    start_time: time
    end_time: time
    slot_range: str | None = Field(default=None, examples=["10 minutes"])


class SlotResponse(BaseModel):
    """Slot response schema."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    doctor_id: int
    slot_date: date = Field(alias="date")
    start_time: time
    end_time: time
    slot_range: str
    status: str

    @classmethod
    def from_entity(cls, slot: Slot) -> "SlotResponse":
        return cls(
            id=slot.id or 0,
            doctor_id=slot.doctor_id,
            slot_date=slot.slot_date,  # type: ignore[arg-type]
            start_time=slot.start_time,  # type: ignore[arg-type]
            end_time=slot.end_time,  # type: ignore[arg-type]
            slot_range=slot.slot_range,
            status=slot.status.value,
        )


class DoctorSummary(BaseModel):
    """Doctor fields echoed back on a booking."""

    id: int
    full_name: str
    specialization: str | None = None
    clinic_name: str | None = None

    @classmethod
    def from_entity(cls, doctor: Doctor) -> "DoctorSummary":
        return cls(
            id=doctor.id or 0,
            full_name=doctor.full_name,
            specialization=doctor.specialization,
            clinic_name=doctor.clinic_name,
        )


class PatientCreateRequest(BaseModel):
    """Booking request schema."""

    name: str = Field(min_length=1, max_length=150)
    phone_number: str
    email: str
    aadhar_number: str
    age: int | None = Field(default=None, ge=0, le=150)
    address: str | None = None
    appointment_at: datetime | None = None
    role_id: int | None = None
    doctor_id: int | None = None
    slot_id: int | None = None


class PatientUpdateRequest(BaseModel):
    """Patient update schema; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=150)
    phone_number: str | None = None
    email: str | None = None
    aadhar_number: str | None = None
    age: int | None = Field(default=None, ge=0, le=150)
    address: str | None = None
    appointment_at: datetime | None = None
    role_id: int | None = None


class PatientResponse(BaseModel):
    """Patient response schema."""

    id: int
    name: str
    phone_number: str
    email: str
    aadhar_number: str
    age: int | None = None
    address: str | None = None
    appointment_at: datetime | None = None
    role_id: int | None = None
    doctor_id: int | None = None
    slot_id: int | None = None

    @classmethod
    def from_entity(cls, patient: Patient) -> "PatientResponse":
        return cls(
            id=patient.id or 0,
            name=patient.name,
            phone_number=patient.phone_number,
            email=patient.email,
            aadhar_number=patient.aadhar_number,
            age=patient.age,
            address=patient.address,
            appointment_at=patient.appointment_at,
            role_id=patient.role_id,
            doctor_id=patient.doctor_id,
            slot_id=patient.slot_id,
        )


class BookingResponse(PatientResponse):
    """Booked patient with its resolved doctor and slot."""

    doctor: DoctorSummary
    slot: SlotResponse


__all__ = [
    "SlotCreateRequest",
    "SlotResponse",
    "DoctorSummary",
    "PatientCreateRequest",
    "PatientUpdateRequest",
    "PatientResponse",
    "BookingResponse",
]
