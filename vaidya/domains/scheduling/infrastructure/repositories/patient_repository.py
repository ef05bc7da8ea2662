# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: SQLAlchemy patient repository; slot uniqueness maps to duplicates.
# ============================================================================
"""
Patient Repository Implementation

SQLAlchemy implementation of IPatientRepository.
"""

import logging
from datetime import datetime

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vaidya.core.domain import DuplicateEntityException
from vaidya.domains.scheduling.application.ports.patient_repository import IPatientRepository
from vaidya.domains.scheduling.domain.entities.patient import Patient
from vaidya.domains.scheduling.infrastructure.persistence.sqlalchemy.models import (
    PATIENT_SLOT_CONSTRAINT,
    PatientModel,
)

logger = logging.getLogger(__name__)


def _is_slot_conflict(error: IntegrityError) -> bool:
    """Whether an integrity error comes from the one-patient-per-slot constraint."""
    message = str(error.orig)
    return PATIENT_SLOT_CONSTRAINT in message or "UNIQUE constraint failed: patients.slot_id" in message


class SQLAlchemyPatientRepository(IPatientRepository):
    """
    SQLAlchemy implementation of patient repository.

    Handles all patient data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, patient_id: int) -> Patient | None:
        """Find patient by ID."""
        result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_all(self) -> list[Patient]:
        """Find every patient."""
        result = await self.session.execute(select(PatientModel).order_by(PatientModel.id))
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_phone(self, phone_number: str) -> list[Patient]:
        """Find patients by phone number."""
        result = await self.session.execute(
            select(PatientModel).where(PatientModel.phone_number == phone_number).order_by(PatientModel.id)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_doctor(self, doctor_id: int) -> list[Patient]:
        """Find patients booked with a doctor."""
        result = await self.session.execute(
            select(PatientModel)
            .where(PatientModel.doctor_id == doctor_id)
            .order_by(PatientModel.appointment_at, PatientModel.id)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_doctor_and_date_range(
        self,
        doctor_id: int,
        start: datetime,
        end: datetime,
    ) -> list[Patient]:
        """Find a doctor's patients with appointments inside [start, end]."""
        result = await self.session.execute(
            select(PatientModel)
            .where(
                and_(
                    PatientModel.doctor_id == doctor_id,
                    PatientModel.appointment_at.between(start, end),
                )
            )
            .order_by(PatientModel.appointment_at)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_slot(self, slot_id: int) -> list[Patient]:
        """Find patients bound to a slot."""
        result = await self.session.execute(
            select(PatientModel).where(PatientModel.slot_id == slot_id).order_by(PatientModel.id)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_first_by_slot(self, slot_id: int) -> Patient | None:
        """Find the first patient bound to a slot."""
        result = await self.session.execute(
            select(PatientModel).where(PatientModel.slot_id == slot_id).order_by(PatientModel.id).limit(1)
        )
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def save(self, patient: Patient) -> Patient:
        """Save or update patient; a second patient on one slot is a duplicate."""
        if patient.id:
            result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient.id))
            model = result.scalar_one_or_none()
            if model:
                self._update_model(model, patient)
            else:
                model = self._to_model(patient)
                self.session.add(model)
        else:
            model = self._to_model(patient)
            self.session.add(model)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if not _is_slot_conflict(e):
                logger.error(f"Integrity error saving patient {patient.id}: {e.orig}")
                raise
            logger.warning(f"Slot {patient.slot_id} already has a patient: {e.orig}")
            raise DuplicateEntityException(entity_type="Patient", field="slot_id", value=patient.slot_id) from e
        await self.session.refresh(model)

        return self._to_entity(model)

    async def delete(self, patient_id: int) -> bool:
        """Delete patient."""
        result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient_id))
        model = result.scalar_one_or_none()
        if model:
            await self.session.delete(model)
            await self.session.commit()
            return True
        return False

    # Mapping methods

    def _to_entity(self, model: PatientModel) -> Patient:
        """Convert model to entity."""
        patient = Patient(
            id=model.id,  # type: ignore[arg-type]
            name=model.name,  # type: ignore[arg-type]
            phone_number=model.phone_number,  # type: ignore[arg-type]
            email=model.email,  # type: ignore[arg-type]
            aadhar_number=model.aadhar_number,  # type: ignore[arg-type]
            age=model.age,  # type: ignore[arg-type]
            address=model.address,  # type: ignore[arg-type]
            appointment_at=model.appointment_at,  # type: ignore[arg-type]
            role_id=model.role_id,  # type: ignore[arg-type]
            doctor_id=model.doctor_id,  # type: ignore[arg-type]
            slot_id=model.slot_id,  # type: ignore[arg-type]
        )

        if model.created_at:
            patient.created_at = model.created_at  # type: ignore[assignment]
        if model.updated_at:
            patient.updated_at = model.updated_at  # type: ignore[assignment]

        return patient

    def _to_model(self, patient: Patient) -> PatientModel:
        """Convert entity to model."""
        return PatientModel(
            name=patient.name,
            phone_number=patient.phone_number,
            email=patient.email,
            aadhar_number=patient.aadhar_number,
            age=patient.age,
            address=patient.address,
            appointment_at=patient.appointment_at,
            role_id=patient.role_id,
            doctor_id=patient.doctor_id,
            slot_id=patient.slot_id,
        )

    def _update_model(self, model: PatientModel, patient: Patient) -> None:
        """Update model from entity; the doctor/slot binding is left untouched."""
        model.name = patient.name  # type: ignore[assignment]
        model.phone_number = patient.phone_number  # type: ignore[assignment]
        model.email = patient.email  # type: ignore[assignment]
        model.aadhar_number = patient.aadhar_number  # type: ignore[assignment]
        model.age = patient.age  # type: ignore[assignment]
        model.address = patient.address  # type: ignore[assignment]
        model.appointment_at = patient.appointment_at  # type: ignore[assignment]
        model.role_id = patient.role_id  # type: ignore[assignment]
