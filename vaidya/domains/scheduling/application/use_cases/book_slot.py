# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for booking one available slot for a new patient.
# ============================================================================
"""
Book Slot Use Case

Binds a new patient record to one available slot.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from vaidya.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidOperationException,
    SlotAlreadyBookedException,
    ValidationException,
)
from vaidya.domains.scheduling.application.ports.doctor_repository import IDoctorRepository
from vaidya.domains.scheduling.application.ports.patient_repository import IPatientRepository
from vaidya.domains.scheduling.application.ports.slot_repository import ISlotRepository
from vaidya.domains.scheduling.domain.entities.doctor import Doctor
from vaidya.domains.scheduling.domain.entities.patient import Patient
from vaidya.domains.scheduling.domain.entities.slot import Slot

logger = logging.getLogger(__name__)


@dataclass
class BookSlotRequest:
    """Patient draft for a booking."""

    name: str
    phone_number: str
    email: str
    aadhar_number: str
    doctor_id: int | None
    slot_id: int | None
    age: int | None = None
    address: str | None = None
    appointment_at: datetime | None = None
    role_id: int | None = None

    def to_patient(self) -> Patient:
        return Patient(
            name=self.name,
            phone_number=self.phone_number,
            email=self.email,
            aadhar_number=self.aadhar_number,
            age=self.age,
            address=self.address,
            appointment_at=self.appointment_at,
            role_id=self.role_id,
        )


@dataclass
class BookSlotResponse:
    """Saved patient with its resolved doctor and slot."""

    patient: Patient
    doctor: Doctor
    slot: Slot


class BookSlotUseCase:
    """
    Use case for booking a slot.

    Every check runs before the single conditional claim on the slot, and the
    claim commits together with the patient insert, so a rejected booking
    leaves nothing behind.
    """

    def __init__(
        self,
        slot_repository: ISlotRepository,
        patient_repository: IPatientRepository,
        doctor_repository: IDoctorRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            slot_repository: Repository for slot data access
            patient_repository: Repository for patient data access
            doctor_repository: Repository (usually cached) for doctor lookups
        """
        self.slot_repo = slot_repository
        self.patient_repo = patient_repository
        self.doctor_repo = doctor_repository

    async def execute(self, request: BookSlotRequest) -> BookSlotResponse:
        """
        Execute the booking.

        Args:
            request: Patient draft with doctor and slot references

        Returns:
            Booking response with the saved patient

        Raises:
            ValidationException: missing references, malformed contact data or an aware appointment time
            EntityNotFoundException: unknown doctor or slot
            SlotAlreadyBookedException: another patient holds the slot
            InvalidOperationException: the slot is not available
        """
        # 1. References are mandatory
        if request.doctor_id is None or request.slot_id is None:
            raise ValidationException("Doctor ID and Slot ID must be provided")

        # 2. Contact data and appointment time before any storage access
        patient = request.to_patient()
        patient.validate_contact()
        patient.validate_appointment()

        # 3. Doctor
        doctor = await self.doctor_repo.find_by_id(request.doctor_id)
        if doctor is None:
            raise EntityNotFoundException(entity_type="Doctor", entity_id=request.doctor_id)

        # 4. Slot
        slot = await self.slot_repo.find_by_id(request.slot_id)
        if slot is None:
            raise EntityNotFoundException(entity_type="Slot", entity_id=request.slot_id)

        # 5. Slot ownership
        if not slot.belongs_to(request.doctor_id):
            raise ValidationException(
                f"Slot ID: {request.slot_id} does not belong to doctor ID: {request.doctor_id}",
                field="slot_id",
            )

        # 6. Existing patient on the slot
        if await self.patient_repo.find_first_by_slot(request.slot_id) is not None:
            logger.warning(f"Booking rejected: slot {request.slot_id} already has a patient")
            raise SlotAlreadyBookedException(slot_id=request.slot_id)

        # 7. Slot status
        if not slot.is_available():
            logger.warning(f"Booking rejected: slot {request.slot_id} is {slot.status.value}")
            raise InvalidOperationException(
                operation="book",
                current_state=slot.status.value,
                message=f"Slot ID: {request.slot_id} is not available for booking",
            )

        # 8. Conditional claim; losing a race shows up as zero affected rows
        if not await self.slot_repo.mark_booked(request.slot_id):
            logger.warning(f"Booking rejected: slot {request.slot_id} claimed concurrently")
            raise SlotAlreadyBookedException(slot_id=request.slot_id)
        slot.mark_booked()

        # 9. Persist the patient; commits the claim as well
        patient.bind(doctor_id=request.doctor_id, slot_id=request.slot_id, appointment_at=slot.starts_at)
        try:
            saved = await self.patient_repo.save(patient)
        except DuplicateEntityException as e:
            logger.warning(f"Booking rejected: unique slot constraint hit for slot {request.slot_id}")
            raise SlotAlreadyBookedException(slot_id=request.slot_id) from e

        logger.info(
            f"Slot {request.slot_id} booked for patient {saved.id} with doctor {request.doctor_id} "
            f"at {saved.appointment_at}"
        )
        return BookSlotResponse(patient=saved, doctor=doctor, slot=slot)
