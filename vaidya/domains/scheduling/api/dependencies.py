"""
Scheduling API Dependencies

FastAPI dependencies for the scheduling domain.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vaidya.core.container import get_container
from vaidya.database.async_db import get_async_db
from vaidya.domains.scheduling.application.use_cases import (
    BookSlotUseCase,
    CheckSlotAvailabilityUseCase,
    DeletePatientUseCase,
    GenerateSlotsUseCase,
    GetPatientUseCase,
    GetSlotsUseCase,
    ListPatientsUseCase,
    SearchPatientsUseCase,
    UpdatePatientUseCase,
    UpdateSlotStatusUseCase,
)

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_async_db)]


def get_generate_slots_use_case(db: DbSession) -> GenerateSlotsUseCase:
    """Get GenerateSlotsUseCase instance with database session."""
    return get_container().create_generate_slots_use_case(db)


def get_check_slot_availability_use_case(db: DbSession) -> CheckSlotAvailabilityUseCase:
    """Get CheckSlotAvailabilityUseCase instance with database session."""
    return get_container().create_check_slot_availability_use_case(db)


def get_update_slot_status_use_case(db: DbSession) -> UpdateSlotStatusUseCase:
    """Get UpdateSlotStatusUseCase instance with database session."""
    return get_container().create_update_slot_status_use_case(db)


def get_slots_use_case(db: DbSession) -> GetSlotsUseCase:
    """Get GetSlotsUseCase instance with database session."""
    return get_container().create_get_slots_use_case(db)


def get_book_slot_use_case(db: DbSession) -> BookSlotUseCase:
    """Get BookSlotUseCase instance with database session."""
    return get_container().create_book_slot_use_case(db)


def get_patient_use_case(db: DbSession) -> GetPatientUseCase:
    """Get GetPatientUseCase instance with database session."""
    return get_container().create_get_patient_use_case(db)


def get_list_patients_use_case(db: DbSession) -> ListPatientsUseCase:
    """Get ListPatientsUseCase instance with database session."""
    return get_container().create_list_patients_use_case(db)


def get_update_patient_use_case(db: DbSession) -> UpdatePatientUseCase:
    """Get UpdatePatientUseCase instance with database session."""
    return get_container().create_update_patient_use_case(db)


def get_delete_patient_use_case(db: DbSession) -> DeletePatientUseCase:
    """Get DeletePatientUseCase instance with database session."""
    return get_container().create_delete_patient_use_case(db)


def get_search_patients_use_case(db: DbSession) -> SearchPatientsUseCase:
    """Get SearchPatientsUseCase instance with database session."""
    return get_container().create_search_patients_use_case(db)


__all__ = [
    "get_generate_slots_use_case",
    "get_check_slot_availability_use_case",
    "get_update_slot_status_use_case",
    "get_slots_use_case",
    "get_book_slot_use_case",
    "get_patient_use_case",
    "get_list_patients_use_case",
    "get_update_patient_use_case",
    "get_delete_patient_use_case",
    "get_search_patients_use_case",
]
