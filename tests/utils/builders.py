"""
Test data builders using the Builder pattern.

Provides fluent interfaces for constructing scheduling entities and requests
with sensible defaults.
"""

from datetime import date, datetime, time

from vaidya.domains.scheduling.application.use_cases.book_slot import BookSlotRequest
from vaidya.domains.scheduling.domain.entities import Doctor, Slot
from vaidya.domains.scheduling.domain.value_objects import SlotStatus


class DoctorBuilder:
    """Builder for doctor entities."""

    def __init__(self):
        self._data = {
            "id": 1,
            "full_name": "Dr. Asha Rao",
            "email": "asha.rao@vaidya.clinic",
            "specialization": "Cardiology",
            "clinic_name": "Vaidya Heart Care",
            "open_time": time(9, 0),
            "close_time": time(17, 0),
        }

    def with_id(self, doctor_id: int) -> "DoctorBuilder":
        """Set doctor ID."""
        self._data["id"] = doctor_id
        return self

    def with_name(self, full_name: str) -> "DoctorBuilder":
        """Set full name."""
        self._data["full_name"] = full_name
        return self

    def with_specialization(self, specialization: str) -> "DoctorBuilder":
        self._data["specialization"] = specialization
        return self

    def build(self) -> Doctor:
        """Build the doctor."""
        return Doctor(**self._data)


class SlotBuilder:
    """Builder for slot entities."""

    def __init__(self):
        self._data = {
            "id": 1,
            "doctor_id": 1,
            "slot_date": date(2025, 3, 10),
            "start_time": time(9, 0),
            "end_time": time(9, 9),
            "slot_range": "10 minutes",
            "status": SlotStatus.AVAILABLE,
        }

    def with_id(self, slot_id: int | None) -> "SlotBuilder":
        """Set slot ID."""
        self._data["id"] = slot_id
        return self

    def for_doctor(self, doctor_id: int) -> "SlotBuilder":
        """Set owning doctor."""
        self._data["doctor_id"] = doctor_id
        return self

    def on(self, slot_date: date) -> "SlotBuilder":
        """Set slot date."""
        self._data["slot_date"] = slot_date
        return self

    def between(self, start_time: time, end_time: time) -> "SlotBuilder":
        """Set start and end times."""
        self._data["start_time"] = start_time
        self._data["end_time"] = end_time
        return self

    def booked(self) -> "SlotBuilder":
        """Mark the slot as booked."""
        self._data["status"] = SlotStatus.BOOKED
        return self

    def build(self) -> Slot:
        """Build the slot."""
        return Slot(**self._data)


class BookingRequestBuilder:
    """Builder for booking requests with valid contact data."""

    def __init__(self):
        self._data = {
            "name": "Ravi Kumar",
            "phone_number": "9876543210",
            "email": "ravi.kumar@example.com",
            "aadhar_number": "234567890123",
            "doctor_id": 1,
            "slot_id": 1,
            "age": 34,
            "address": "12 MG Road, Bengaluru",
            "appointment_at": None,
            "role_id": None,
        }

    def with_name(self, name: str) -> "BookingRequestBuilder":
        self._data["name"] = name
        return self

    def with_phone(self, phone_number: str) -> "BookingRequestBuilder":
        """Set phone number."""
        self._data["phone_number"] = phone_number
        return self

    def with_email(self, email: str) -> "BookingRequestBuilder":
        """Set email."""
        self._data["email"] = email
        return self

    def with_aadhar(self, aadhar_number: str) -> "BookingRequestBuilder":
        """Set Aadhar number."""
        self._data["aadhar_number"] = aadhar_number
        return self

    def for_doctor(self, doctor_id: int | None) -> "BookingRequestBuilder":
        self._data["doctor_id"] = doctor_id
        return self

    def for_slot(self, slot_id: int | None) -> "BookingRequestBuilder":
        self._data["slot_id"] = slot_id
        return self

    def at(self, appointment_at: datetime) -> "BookingRequestBuilder":
        """Set an explicit appointment time."""
        self._data["appointment_at"] = appointment_at
        return self

    def build(self) -> BookSlotRequest:
        """Build the booking request."""
        return BookSlotRequest(**self._data)
