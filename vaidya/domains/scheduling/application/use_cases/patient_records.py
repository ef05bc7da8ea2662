# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Patient CRUD and lookups by phone, doctor, date and slot.
# ============================================================================
"""
Patient Records Use Cases

CRUD and lookups over booked patients.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any

from vaidya.core.domain import EntityNotFoundException, ValidationException
from vaidya.domains.scheduling.application.ports.patient_repository import IPatientRepository
from vaidya.domains.scheduling.domain.entities.patient import Patient

logger = logging.getLogger(__name__)


async def _get_patient(patient_repo: IPatientRepository, patient_id: int) -> Patient:
    patient = await patient_repo.find_by_id(patient_id)
    if patient is None:
        raise EntityNotFoundException(entity_type="Patient", entity_id=patient_id)
    return patient


class GetPatientUseCase:
    """Fetches one patient by ID."""

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self, patient_id: int) -> Patient:
        return await _get_patient(self.patient_repo, patient_id)


class ListPatientsUseCase:
    """Returns every patient."""

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self) -> list[Patient]:
        return await self.patient_repo.find_all()


@dataclass
class UpdatePatientRequest:
    """Changes to apply to a patient; only updatable fields are honoured."""

    patient_id: int
    changes: dict[str, Any] = field(default_factory=dict)


class UpdatePatientUseCase:
    """
    Updates a patient's personal and appointment fields.

    Contact data and the appointment time are validated again after the
    changes are applied. The doctor and slot binding never changes.
    """

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self, request: UpdatePatientRequest) -> Patient:
        patient = await _get_patient(self.patient_repo, request.patient_id)

        patient.apply_changes(request.changes)
        patient.validate_contact()
        patient.validate_appointment()

        saved = await self.patient_repo.save(patient)
        logger.info(f"Patient {saved.id} updated")
        return saved


class DeletePatientUseCase:
    """
    Deletes a patient.

    The slot the patient held stays booked.
    """

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self, patient_id: int) -> None:
        await _get_patient(self.patient_repo, patient_id)
        await self.patient_repo.delete(patient_id)
        logger.info(f"Patient {patient_id} deleted")


class SearchPatientsUseCase:
    """Patient lookups by phone, doctor, appointment dates and slot."""

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def by_phone(self, phone_number: str) -> list[Patient]:
        return await self.patient_repo.find_by_phone(phone_number)

    async def by_doctor(self, doctor_id: int) -> list[Patient]:
        return await self.patient_repo.find_by_doctor(doctor_id)

    async def by_doctor_and_date(self, doctor_id: int, appointment_date: date) -> list[Patient]:
        """Patients of a doctor over one whole calendar day."""
        return await self.by_doctor_and_date_range(doctor_id, appointment_date, appointment_date)

    async def by_doctor_and_date_range(
        self,
        doctor_id: int,
        start_date: date,
        end_date: date,
    ) -> list[Patient]:
        """
        Patients of a doctor between two dates, both days included.

        Raises:
            ValidationException: if ``end_date`` precedes ``start_date``
        """
        if end_date < start_date:
            raise ValidationException("end_date must not be before start_date", field="end_date")
        return await self.patient_repo.find_by_doctor_and_date_range(
            doctor_id,
            datetime.combine(start_date, time.min),
            datetime.combine(end_date, time.max),
        )

    async def by_slot(self, slot_id: int) -> list[Patient]:
        return await self.patient_repo.find_by_slot(slot_id)
