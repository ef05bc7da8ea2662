"""
Doctor Repository Port

Interface for doctor lookups following Clean Architecture.
"""

from typing import Protocol, runtime_checkable

from vaidya.domains.scheduling.domain.entities.doctor import Doctor


@runtime_checkable
class IDoctorRepository(Protocol):
    """Doctor repository interface."""

    async def find_by_id(self, doctor_id: int, for_update: bool = False) -> Doctor | None:
        """
        Find doctor by ID.

        Args:
            doctor_id: Unique doctor identifier
            for_update: Lock the doctor row until the transaction ends

        Returns:
            Doctor if found, None otherwise
        """
        ...

    async def save(self, doctor: Doctor) -> Doctor:
        """
        Save or update doctor.

        Args:
            doctor: Doctor to save

        Returns:
            Saved doctor with ID
        """
        ...
