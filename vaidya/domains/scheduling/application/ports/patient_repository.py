"""
Patient Repository Port

Interface for patient data access following Clean Architecture.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from vaidya.domains.scheduling.domain.entities.patient import Patient


@runtime_checkable
class IPatientRepository(Protocol):
    """Patient repository interface."""

    async def find_by_id(self, patient_id: int) -> Patient | None:
        """
        Find patient by ID.

        Args:
            patient_id: Unique patient identifier

        Returns:
            Patient if found, None otherwise
        """
        ...

    async def find_all(self) -> list[Patient]:
        """Return every patient, ordered by ID."""
        ...

    async def find_by_phone(self, phone_number: str) -> list[Patient]:
        """
        Find patients by phone number.

        Args:
            phone_number: Ten digit mobile number

        Returns:
            Matching patients
        """
        ...

    async def find_by_doctor(self, doctor_id: int) -> list[Patient]:
        """Find every patient booked with a doctor."""
        ...

    async def find_by_doctor_and_date_range(
        self,
        doctor_id: int,
        start: datetime,
        end: datetime,
    ) -> list[Patient]:
        """
        Find a doctor's patients with an appointment inside ``[start, end]``.

        Args:
            doctor_id: Doctor ID
            start: Inclusive lower bound
            end: Inclusive upper bound

        Returns:
            Patients ordered by appointment time
        """
        ...

    async def find_by_slot(self, slot_id: int) -> list[Patient]:
        """Find patients bound to a slot."""
        ...

    async def find_first_by_slot(self, slot_id: int) -> Patient | None:
        """
        Find the first patient bound to a slot.

        Args:
            slot_id: Slot ID

        Returns:
            Patient if the slot is taken, None otherwise
        """
        ...

    async def save(self, patient: Patient) -> Patient:
        """
        Save or update patient.

        Args:
            patient: Patient to save

        Returns:
            Saved patient with ID

        Raises:
            DuplicateEntityException: if another patient already holds the slot
        """
        ...

    async def delete(self, patient_id: int) -> bool:
        """
        Delete patient.

        Args:
            patient_id: Patient ID

        Returns:
            True if deleted
        """
        ...
