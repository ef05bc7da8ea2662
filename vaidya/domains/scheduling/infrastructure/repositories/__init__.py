# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: SQLAlchemy repository exports.
# ============================================================================
"""
Scheduling Infrastructure Repositories

Repository implementations for the scheduling domain.
"""

from vaidya.domains.scheduling.infrastructure.repositories.cached_doctor_repository import (
    CachedDoctorRepository,
)
from vaidya.domains.scheduling.infrastructure.repositories.doctor_repository import (
    SQLAlchemyDoctorRepository,
)
from vaidya.domains.scheduling.infrastructure.repositories.patient_repository import (
    SQLAlchemyPatientRepository,
)
from vaidya.domains.scheduling.infrastructure.repositories.slot_repository import (
    SQLAlchemySlotRepository,
)

__all__ = [
    "SQLAlchemySlotRepository",
    "SQLAlchemyPatientRepository",
    "SQLAlchemyDoctorRepository",
    "CachedDoctorRepository",
]
