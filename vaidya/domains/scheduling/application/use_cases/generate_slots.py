# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Use case for generating a doctor's slots over a time window.
# ============================================================================
"""
Generate Slots Use Case

Splits a doctor's working window into bookable slots.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, time

from vaidya.core.domain import EntityNotFoundException, SlotOverlapException
from vaidya.domains.scheduling.application.ports.doctor_repository import IDoctorRepository
from vaidya.domains.scheduling.application.ports.slot_repository import ISlotRepository
from vaidya.domains.scheduling.domain.entities.slot import Slot
from vaidya.domains.scheduling.domain.services.slot_generator import SlotGenerator

logger = logging.getLogger(__name__)

DEFAULT_SLOT_RANGE = "10 minutes"


@dataclass
class GenerateSlotsRequest:
    """Request for generating slots."""

    doctor_id: int
    slot_date: date
    start_time: time
    end_time: time
    slot_range: str | None = None


@dataclass
class GenerateSlotsResponse:
    """Slots created by one generation call."""

    slots: list[Slot] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.slots)


class GenerateSlotsUseCase:
    """
    Use case for slot generation.

    The batch is all-or-nothing: every candidate is checked for overlap before
    anything is written, and the doctor row stays locked until the request
    transaction ends so two generations for one doctor cannot interleave.
    """

    def __init__(
        self,
        slot_repository: ISlotRepository,
        doctor_repository: IDoctorRepository,
        slot_generator: SlotGenerator | None = None,
        default_slot_range: str = DEFAULT_SLOT_RANGE,
    ):
        """
        Initialize use case with dependencies.

        Args:
            slot_repository: Repository for slot data access
            doctor_repository: Repository for doctor lookups
            slot_generator: Domain service planning the slots
            default_slot_range: Label used when a request carries none
        """
        self.slot_repo = slot_repository
        self.doctor_repo = doctor_repository
        self.generator = slot_generator or SlotGenerator()
        self.default_slot_range = default_slot_range

    async def execute(self, request: GenerateSlotsRequest) -> GenerateSlotsResponse:
        """
        Execute slot generation.

        Args:
            request: Generation window

        Returns:
            Response with the persisted slots (possibly empty)

        Raises:
            EntityNotFoundException: unknown doctor
            ValidationException: malformed slot range
            SlotOverlapException: a candidate collides with an existing slot
        """
        doctor = await self.doctor_repo.find_by_id(request.doctor_id, for_update=True)
        if doctor is None:
            logger.warning(f"Slot generation rejected: doctor {request.doctor_id} not found")
            raise EntityNotFoundException(entity_type="Doctor", entity_id=request.doctor_id)

        window = self.generator.window(
            doctor_id=request.doctor_id,
            slot_date=request.slot_date,
            start_time=request.start_time,
            end_time=request.end_time,
            slot_range=request.slot_range or self.default_slot_range,
        )
        candidates = self.generator.plan(window)

        for candidate in candidates:
            overlapping = await self.slot_repo.exists_overlap(
                doctor_id=request.doctor_id,
                slot_date=request.slot_date,
                candidate_end=candidate.end_time,  # type: ignore[arg-type]
                candidate_start=candidate.start_time,  # type: ignore[arg-type]
            )
            if overlapping:
                logger.warning(
                    f"Slot generation rejected: overlap for doctor {request.doctor_id} on "
                    f"{request.slot_date} at {candidate.start_time}"
                )
                raise SlotOverlapException(
                    doctor_id=request.doctor_id,
                    slot_date=request.slot_date,
                    start_time=candidate.start_time,
                    end_time=candidate.end_time,
                )

        if not candidates:
            logger.info(
                f"No slot of {window.duration.minutes} minutes fits {request.start_time}-{request.end_time} "
                f"for doctor {request.doctor_id} on {request.slot_date}"
            )
            return GenerateSlotsResponse()

        saved = await self.slot_repo.save_all(candidates)
        logger.info(f"Created {len(saved)} slots for doctor {request.doctor_id} on {request.slot_date}")
        return GenerateSlotsResponse(slots=saved)
