"""
Scheduling Domain Container.

Single Responsibility: Wire all scheduling domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

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
from vaidya.domains.scheduling.infrastructure.repositories import (
    CachedDoctorRepository,
    SQLAlchemyDoctorRepository,
    SQLAlchemyPatientRepository,
    SQLAlchemySlotRepository,
)

if TYPE_CHECKING:
    from vaidya.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class SchedulingContainer:
    """
    Scheduling domain container.

    Single Responsibility: Create scheduling repositories and use cases.
    Repositories are built per request session.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize scheduling container.

        Args:
            base: BaseContainer with shared singletons
        """
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_slot_repository(self, db: AsyncSession) -> SQLAlchemySlotRepository:
        """Create Slot Repository."""
        return SQLAlchemySlotRepository(session=db)

    def create_patient_repository(self, db: AsyncSession) -> SQLAlchemyPatientRepository:
        """Create Patient Repository."""
        return SQLAlchemyPatientRepository(session=db)

    def create_doctor_repository(self, db: AsyncSession) -> CachedDoctorRepository:
        """Create Doctor Repository behind the shared doctor cache."""
        return CachedDoctorRepository(
            repository=SQLAlchemyDoctorRepository(session=db),
            cache=self._base.get_doctor_cache(),
        )

    # ==================== SLOT USE CASES ====================

    def create_generate_slots_use_case(self, db: AsyncSession) -> GenerateSlotsUseCase:
        """Create GenerateSlotsUseCase with dependencies."""
        return GenerateSlotsUseCase(
            slot_repository=self.create_slot_repository(db),
            doctor_repository=self.create_doctor_repository(db),
            default_slot_range=self._base.settings.SLOT_DEFAULT_RANGE,
        )

    def create_check_slot_availability_use_case(self, db: AsyncSession) -> CheckSlotAvailabilityUseCase:
        """Create CheckSlotAvailabilityUseCase with dependencies."""
        return CheckSlotAvailabilityUseCase(slot_repository=self.create_slot_repository(db))

    def create_update_slot_status_use_case(self, db: AsyncSession) -> UpdateSlotStatusUseCase:
        """Create UpdateSlotStatusUseCase with dependencies."""
        return UpdateSlotStatusUseCase(slot_repository=self.create_slot_repository(db))

    def create_get_slots_use_case(self, db: AsyncSession) -> GetSlotsUseCase:
        """Create GetSlotsUseCase with dependencies."""
        return GetSlotsUseCase(slot_repository=self.create_slot_repository(db))

    # ==================== PATIENT USE CASES ====================

    def create_book_slot_use_case(self, db: AsyncSession) -> BookSlotUseCase:
        """Create BookSlotUseCase with dependencies."""
        return BookSlotUseCase(
            slot_repository=self.create_slot_repository(db),
            patient_repository=self.create_patient_repository(db),
            doctor_repository=self.create_doctor_repository(db),
        )

    def create_get_patient_use_case(self, db: AsyncSession) -> GetPatientUseCase:
        """Create GetPatientUseCase with dependencies."""
        return GetPatientUseCase(patient_repository=self.create_patient_repository(db))

    def create_list_patients_use_case(self, db: AsyncSession) -> ListPatientsUseCase:
        """Create ListPatientsUseCase with dependencies."""
        return ListPatientsUseCase(patient_repository=self.create_patient_repository(db))

    def create_update_patient_use_case(self, db: AsyncSession) -> UpdatePatientUseCase:
        """Create UpdatePatientUseCase with dependencies."""
        return UpdatePatientUseCase(patient_repository=self.create_patient_repository(db))

    def create_delete_patient_use_case(self, db: AsyncSession) -> DeletePatientUseCase:
        """Create DeletePatientUseCase with dependencies."""
        return DeletePatientUseCase(patient_repository=self.create_patient_repository(db))

    def create_search_patients_use_case(self, db: AsyncSession) -> SearchPatientsUseCase:
        """Create SearchPatientsUseCase with dependencies."""
        return SearchPatientsUseCase(patient_repository=self.create_patient_repository(db))
