"""Test utilities and helpers."""

from tests.utils.builders import BookingRequestBuilder, DoctorBuilder, SlotBuilder
from tests.utils.fakes import (
    InMemoryDoctorRepository,
    InMemoryPatientRepository,
    InMemorySlotRepository,
)

__all__ = [
    # Builders
    "DoctorBuilder",
    "SlotBuilder",
    "BookingRequestBuilder",
    # Fakes
    "InMemorySlotRepository",
    "InMemoryPatientRepository",
    "InMemoryDoctorRepository",
]
