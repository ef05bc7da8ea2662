"""
Scheduling Domain Entities

Business entities with identity and lifecycle for the scheduling domain.
"""

from vaidya.domains.scheduling.domain.entities.doctor import Doctor
from vaidya.domains.scheduling.domain.entities.patient import Patient
from vaidya.domains.scheduling.domain.entities.slot import Slot

__all__ = [
    "Doctor",
    "Patient",
    "Slot",
]
