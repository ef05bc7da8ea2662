# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: SQLAlchemy doctor repository with optional row lock.
# ============================================================================
"""
Doctor Repository Implementation

SQLAlchemy implementation of IDoctorRepository.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vaidya.domains.scheduling.application.ports.doctor_repository import IDoctorRepository
from vaidya.domains.scheduling.domain.entities.doctor import Doctor
from vaidya.domains.scheduling.infrastructure.persistence.sqlalchemy.models import DoctorModel

logger = logging.getLogger(__name__)


class SQLAlchemyDoctorRepository(IDoctorRepository):
    """SQLAlchemy implementation of doctor repository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, doctor_id: int, for_update: bool = False) -> Doctor | None:
        """Find doctor by ID, optionally locking the row (SELECT ... FOR UPDATE)."""
        query = select(DoctorModel).where(DoctorModel.id == doctor_id)
        if for_update:
            query = query.with_for_update()

        result = await self.session.execute(query)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, doctor: Doctor) -> Doctor:
        """Save or update doctor."""
        if doctor.id:
            result = await self.session.execute(select(DoctorModel).where(DoctorModel.id == doctor.id))
            model = result.scalar_one_or_none()
            if model:
                self._update_model(model, doctor)
            else:
                model = self._to_model(doctor)
                self.session.add(model)
        else:
            model = self._to_model(doctor)
            self.session.add(model)

        await self.session.commit()
        await self.session.refresh(model)

        return self._to_entity(model)

    # Mapping methods

    def _to_entity(self, model: DoctorModel) -> Doctor:
        """Convert model to entity."""
        doctor = Doctor(
            id=model.id,  # type: ignore[arg-type]
            full_name=model.full_name,  # type: ignore[arg-type]
            email=model.email,  # type: ignore[arg-type]
            specialization=model.specialization,  # type: ignore[arg-type]
            qualification=model.qualification,  # type: ignore[arg-type]
            experience=model.experience,  # type: ignore[arg-type]
            phone_number=model.phone_number,  # type: ignore[arg-type]
            gender=model.gender,  # type: ignore[arg-type]
            address=model.address,  # type: ignore[arg-type]
            clinic_name=model.clinic_name,  # type: ignore[arg-type]
            open_time=model.open_time,  # type: ignore[arg-type]
            close_time=model.close_time,  # type: ignore[arg-type]
            is_enabled=model.is_enabled if model.is_enabled is not None else True,  # type: ignore[arg-type]
        )

        if model.created_at:
            doctor.created_at = model.created_at  # type: ignore[assignment]
        if model.updated_at:
            doctor.updated_at = model.updated_at  # type: ignore[assignment]

        return doctor

    def _to_model(self, doctor: Doctor) -> DoctorModel:
        """Convert entity to model."""
        model = DoctorModel()
        self._update_model(model, doctor)
        return model

    def _update_model(self, model: DoctorModel, doctor: Doctor) -> None:
        """Update model from entity."""
        model.full_name = doctor.full_name  # type: ignore[assignment]
        model.email = doctor.email  # type: ignore[assignment]
        model.specialization = doctor.specialization  # type: ignore[assignment]
        model.qualification = doctor.qualification  # type: ignore[assignment]
        model.experience = doctor.experience  # type: ignore[assignment]
        model.phone_number = doctor.phone_number  # type: ignore[assignment]
        model.gender = doctor.gender  # type: ignore[assignment]
        model.address = doctor.address  # type: ignore[assignment]
        model.clinic_name = doctor.clinic_name  # type: ignore[assignment]
        model.open_time = doctor.open_time  # type: ignore[assignment]
        model.close_time = doctor.close_time  # type: ignore[assignment]
        model.is_enabled = doctor.is_enabled  # type: ignore[assignment]
