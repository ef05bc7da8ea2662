"""
Scheduling Domain Layer

Core business logic for the scheduling bounded context.

Components:
- Entities: Doctor, Slot, Patient
- Value Objects: SlotStatus, SlotDuration, MobileNumber, AadharNumber
- Domain Services: SlotGenerator (divides a window into slots)
"""

from vaidya.domains.scheduling.domain.entities import Doctor, Patient, Slot
from vaidya.domains.scheduling.domain.services import SlotGenerator, SlotWindow
from vaidya.domains.scheduling.domain.value_objects import (
    AadharNumber,
    MobileNumber,
    SlotDuration,
    SlotStatus,
)

__all__ = [
    # Entities
    "Doctor",
    "Patient",
    "Slot",
    # Value Objects
    "SlotStatus",
    "SlotDuration",
    "MobileNumber",
    "AadharNumber",
    # Services
    "SlotGenerator",
    "SlotWindow",
]
