"""
Patient Entity for Scheduling Domain

A patient record bound to exactly one doctor and one booked slot.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from vaidya.core.domain import AggregateRoot, Email, ValidationException

from ..value_objects.slot_status import AadharNumber, MobileNumber

# Fields a caller may change after booking; the doctor/slot binding is fixed.
UPDATABLE_FIELDS = (
    "name",
    "phone_number",
    "email",
    "aadhar_number",
    "age",
    "address",
    "appointment_at",
    "role_id",
)

REQUIRED_FIELDS = ("name", "phone_number", "email", "aadhar_number")


@dataclass
class Patient(AggregateRoot[int]):
    """
    Patient aggregate root.

    Example:
        ```python
        patient = Patient(
            name="Ravi Kumar",
            phone_number="9876543210",
            email="ravi@example.com",
            aadhar_number="234567890123",
            doctor_id=7,
            slot_id=42,
        )
        patient.validate_contact()
        ```
    """

    name: str = ""
    phone_number: str = ""
    email: str = ""
    aadhar_number: str = ""
    age: int | None = None
    address: str | None = None
    appointment_at: datetime | None = None
    role_id: int | None = None

    # References
    doctor_id: int | None = None
    slot_id: int | None = None

    def validate_contact(self) -> None:
        """
        Check email, phone and Aadhar formats, in that order.

        Raises:
            ValidationException: naming the first offending field
        """
        try:
            Email(self.email)
        except ValueError as e:
            raise ValidationException(f"Invalid email format: {self.email}", field="email") from e
        try:
            MobileNumber(self.phone_number)
        except ValueError as e:
            raise ValidationException(
                "Phone number must be 10 digits and start with 6, 7, 8 or 9",
                field="phone_number",
            ) from e
        try:
            AadharNumber(self.aadhar_number)
        except ValueError as e:
            raise ValidationException(
                "Aadhar number must be 12 digits and cannot start with 0 or 1",
                field="aadhar_number",
            ) from e

    def validate_appointment(self) -> None:
        """
        Check the appointment timestamp is a naive clinic-local datetime,
        like slot dates and times.

        Raises:
            ValidationException: if the timestamp has tzinfo
        """
        if self.appointment_at is not None and self.appointment_at.tzinfo is not None:
            raise ValidationException(
                "Appointment time must be a local date and time without a timezone offset",
                field="appointment_at",
            )

    def bind(self, doctor_id: int, slot_id: int, appointment_at: datetime | None) -> None:
        """Attach the patient to a claimed slot."""
        self.doctor_id = doctor_id
        self.slot_id = slot_id
        if self.appointment_at is None:
            self.appointment_at = appointment_at
        self.touch()

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """
        Copy updatable fields from ``changes``; anything else is ignored.

        Raises:
            ValidationException: if a required field is set to None; nothing is changed
        """
        for name in REQUIRED_FIELDS:
            if name in changes and changes[name] is None:
                raise ValidationException(f"{name} cannot be null", field=name)
        for name in UPDATABLE_FIELDS:
            if name in changes:
                setattr(self, name, changes[name])
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "phone_number": self.phone_number,
            "email": self.email,
            "aadhar_number": self.aadhar_number,
            "age": self.age,
            "address": self.address,
            "appointment_at": self.appointment_at.isoformat() if self.appointment_at else None,
            "role_id": self.role_id,
            "doctor_id": self.doctor_id,
            "slot_id": self.slot_id,
        }
