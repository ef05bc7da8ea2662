# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Repository port exports.
# ============================================================================
"""
Scheduling Domain Ports

Interfaces (ports) for the scheduling domain following Clean Architecture.
"""

from vaidya.domains.scheduling.application.ports.doctor_repository import IDoctorRepository
from vaidya.domains.scheduling.application.ports.patient_repository import IPatientRepository
from vaidya.domains.scheduling.application.ports.slot_repository import ISlotRepository

__all__ = [
    "IDoctorRepository",
    "IPatientRepository",
    "ISlotRepository",
]
