# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case exports for slot generation, booking and patient records.
# ============================================================================
"""
Scheduling Use Cases

Application layer use cases for the scheduling domain.
"""

from vaidya.domains.scheduling.application.use_cases.book_slot import (
    BookSlotRequest,
    BookSlotResponse,
    BookSlotUseCase,
)
from vaidya.domains.scheduling.application.use_cases.generate_slots import (
    GenerateSlotsRequest,
    GenerateSlotsResponse,
    GenerateSlotsUseCase,
)
from vaidya.domains.scheduling.application.use_cases.patient_records import (
    DeletePatientUseCase,
    GetPatientUseCase,
    ListPatientsUseCase,
    SearchPatientsUseCase,
    UpdatePatientRequest,
    UpdatePatientUseCase,
)
from vaidya.domains.scheduling.application.use_cases.slot_queries import (
    CheckSlotAvailabilityUseCase,
    GetSlotsUseCase,
    UpdateSlotStatusRequest,
    UpdateSlotStatusUseCase,
)

__all__ = [
    # Generate Slots
    "GenerateSlotsRequest",
    "GenerateSlotsResponse",
    "GenerateSlotsUseCase",
    # Book Slot
    "BookSlotRequest",
    "BookSlotResponse",
    "BookSlotUseCase",
    # Slot Queries
    "CheckSlotAvailabilityUseCase",
    "UpdateSlotStatusRequest",
    "UpdateSlotStatusUseCase",
    "GetSlotsUseCase",
    # Patient Records
    "GetPatientUseCase",
    "ListPatientsUseCase",
    "UpdatePatientRequest",
    "UpdatePatientUseCase",
    "DeletePatientUseCase",
    "SearchPatientsUseCase",
]
