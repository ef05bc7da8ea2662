# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Slot repository port, including the conditional booking claim.
# ============================================================================
"""
Slot Repository Port

Interface for slot data access following Clean Architecture.
"""

from datetime import date, time
from typing import Protocol, runtime_checkable

from vaidya.domains.scheduling.domain.entities.slot import Slot


@runtime_checkable
class ISlotRepository(Protocol):
    """
    Slot repository interface.

    Writes through ``save_all`` and ``save`` commit; ``mark_booked`` only
    flushes so the claim commits together with the patient insert.
    """

    async def find_by_id(self, slot_id: int) -> Slot | None:
        """
        Find slot by ID.

        Args:
            slot_id: Unique slot identifier

        Returns:
            Slot if found, None otherwise
        """
        ...

    async def find_by_date(self, slot_date: date) -> list[Slot]:
        """
        Find every slot on a date, ordered by start time.

        Args:
            slot_date: Calendar date

        Returns:
            List of slots
        """
        ...

    async def find_by_doctor_and_date(self, doctor_id: int, slot_date: date) -> list[Slot]:
        """
        Find a doctor's slots on a date, ordered by start time.

        Args:
            doctor_id: Doctor ID
            slot_date: Calendar date

        Returns:
            List of slots
        """
        ...

    async def exists_overlap(
        self,
        doctor_id: int,
        slot_date: date,
        candidate_end: time,
        candidate_start: time,
    ) -> bool:
        """
        Check for a persisted slot with ``start <= candidate_end`` and ``end >= candidate_start``.

        Args:
            doctor_id: Doctor ID
            slot_date: Calendar date
            candidate_end: Inclusive end of the candidate
            candidate_start: Start of the candidate

        Returns:
            True if an overlapping slot exists
        """
        ...

    async def save_all(self, slots: list[Slot]) -> list[Slot]:
        """
        Insert a batch of slots in one transaction.

        Args:
            slots: New slots

        Returns:
            Saved slots with IDs
        """
        ...

    async def save(self, slot: Slot) -> Slot:
        """
        Save or update a slot.

        Args:
            slot: Slot to save

        Returns:
            Saved slot
        """
        ...

    async def mark_booked(self, slot_id: int) -> bool:
        """
        Atomically flip an available slot to booked.

        Args:
            slot_id: Slot ID

        Returns:
            True if this call claimed the slot, False if it was no longer available
        """
        ...
