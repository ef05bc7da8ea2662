# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Slot availability, status updates and listings by date.
# ============================================================================
"""
Slot Query Use Cases

Availability checks, administrative status updates and slot listings.
"""

import logging
from dataclasses import dataclass
from datetime import date

from vaidya.core.domain import EntityNotFoundException, ValidationException
from vaidya.domains.scheduling.application.ports.slot_repository import ISlotRepository
from vaidya.domains.scheduling.domain.entities.slot import Slot
from vaidya.domains.scheduling.domain.value_objects.slot_status import SlotStatus

logger = logging.getLogger(__name__)


async def _get_slot(slot_repo: ISlotRepository, slot_id: int) -> Slot:
    slot = await slot_repo.find_by_id(slot_id)
    if slot is None:
        raise EntityNotFoundException(entity_type="Slot", entity_id=slot_id)
    return slot


class CheckSlotAvailabilityUseCase:
    """Tells whether a slot can still be booked."""

    def __init__(self, slot_repository: ISlotRepository):
        self.slot_repo = slot_repository

    async def execute(self, slot_id: int) -> bool:
        """
        Args:
            slot_id: Slot ID

        Returns:
            True if the slot is available

        Raises:
            EntityNotFoundException: unknown slot
        """
        slot = await _get_slot(self.slot_repo, slot_id)
        return slot.is_available()


@dataclass
class UpdateSlotStatusRequest:
    """Request for overwriting a slot status."""

    slot_id: int
    status: str


class UpdateSlotStatusUseCase:
    """
    Overwrites a slot status.

    The status text is matched case-insensitively against SlotStatus.
    """

    def __init__(self, slot_repository: ISlotRepository):
        self.slot_repo = slot_repository

    async def execute(self, request: UpdateSlotStatusRequest) -> Slot:
        slot = await _get_slot(self.slot_repo, request.slot_id)

        try:
            status = SlotStatus.from_string(request.status)
        except ValueError as e:
            raise ValidationException(
                f"Invalid slot status '{request.status}'. Expected one of: {', '.join(SlotStatus.values())}",
                field="status",
            ) from e

        slot.change_status(status)
        saved = await self.slot_repo.save(slot)
        logger.info(f"Slot {saved.id} status set to {status.value}")
        return saved


class GetSlotsUseCase:
    """Lists slots by date, optionally narrowed to one doctor."""

    def __init__(self, slot_repository: ISlotRepository):
        self.slot_repo = slot_repository

    async def by_date(self, slot_date: date) -> list[Slot]:
        return await self.slot_repo.find_by_date(slot_date)

    async def by_doctor_and_date(self, slot_date: date, doctor_id: int) -> list[Slot]:
        return await self.slot_repo.find_by_doctor_and_date(doctor_id, slot_date)
