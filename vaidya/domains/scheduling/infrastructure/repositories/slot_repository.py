# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: SQLAlchemy slot repository with overlap check and atomic claim.
# ============================================================================
"""
Slot Repository Implementation

SQLAlchemy implementation of ISlotRepository.
"""

import logging
from datetime import UTC, date, datetime, time

from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vaidya.domains.scheduling.application.ports.slot_repository import ISlotRepository
from vaidya.domains.scheduling.domain.entities.slot import Slot
from vaidya.domains.scheduling.domain.value_objects.slot_status import SlotStatus
from vaidya.domains.scheduling.infrastructure.persistence.sqlalchemy.models import SlotModel

logger = logging.getLogger(__name__)


class SQLAlchemySlotRepository(ISlotRepository):
    """
    SQLAlchemy implementation of slot repository.

    Handles all slot data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, slot_id: int) -> Slot | None:
        """Find slot by ID."""
        result = await self.session.execute(select(SlotModel).where(SlotModel.id == slot_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_date(self, slot_date: date) -> list[Slot]:
        """Find all slots on a date."""
        result = await self.session.execute(
            select(SlotModel)
            .where(SlotModel.slot_date == slot_date)
            .order_by(SlotModel.start_time, SlotModel.doctor_id)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_doctor_and_date(self, doctor_id: int, slot_date: date) -> list[Slot]:
        """Find a doctor's slots on a date."""
        result = await self.session.execute(
            select(SlotModel)
            .where(
                and_(
                    SlotModel.doctor_id == doctor_id,
                    SlotModel.slot_date == slot_date,
                )
            )
            .order_by(SlotModel.start_time)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def exists_overlap(
        self,
        doctor_id: int,
        slot_date: date,
        candidate_end: time,
        candidate_start: time,
    ) -> bool:
        """Check for an existing slot touching the candidate window (inclusive bounds)."""
        result = await self.session.execute(
            select(SlotModel.id)
            .where(
                and_(
                    SlotModel.doctor_id == doctor_id,
                    SlotModel.slot_date == slot_date,
                    SlotModel.start_time <= candidate_end,
                    SlotModel.end_time >= candidate_start,
                )
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def save_all(self, slots: list[Slot]) -> list[Slot]:
        """Insert a batch of slots and commit once."""
        models = [self._to_model(slot) for slot in slots]
        self.session.add_all(models)

        await self.session.commit()
        for model in models:
            await self.session.refresh(model)

        return [self._to_entity(m) for m in models]

    async def save(self, slot: Slot) -> Slot:
        """Save or update slot."""
        if slot.id:
            result = await self.session.execute(select(SlotModel).where(SlotModel.id == slot.id))
            model = result.scalar_one_or_none()
            if model:
                self._update_model(model, slot)
            else:
                model = self._to_model(slot)
                self.session.add(model)
        else:
            model = self._to_model(slot)
            self.session.add(model)

        await self.session.commit()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def mark_booked(self, slot_id: int) -> bool:
        """
        Claim a slot with a conditional UPDATE.

        Only flushes; the caller's transaction commits the claim.
        """
        result = await self.session.execute(
            update(SlotModel)
            .where(
                and_(
                    SlotModel.id == slot_id,
                    SlotModel.status == SlotStatus.AVAILABLE,
                )
            )
            .values(status=SlotStatus.BOOKED, updated_at=datetime.now(UTC))
        )
        claimed = (result.rowcount or 0) > 0  # type: ignore[attr-defined]
        if not claimed:
            logger.debug(f"Slot {slot_id} was not available to claim")
        return claimed

    # Mapping methods

    def _to_entity(self, model: SlotModel) -> Slot:
        """Convert model to entity."""
        slot = Slot(
            id=model.id,  # type: ignore[arg-type]
            doctor_id=model.doctor_id,  # type: ignore[arg-type]
            slot_date=model.slot_date,  # type: ignore[arg-type]
            start_time=model.start_time,  # type: ignore[arg-type]
            end_time=model.end_time,  # type: ignore[arg-type]
            slot_range=model.slot_range or "",  # type: ignore[arg-type]
            status=model.status or SlotStatus.AVAILABLE,  # type: ignore[arg-type]
        )

        if model.created_at:
            slot.created_at = model.created_at  # type: ignore[assignment]
        if model.updated_at:
            slot.updated_at = model.updated_at  # type: ignore[assignment]

        return slot

    def _to_model(self, slot: Slot) -> SlotModel:
        """Convert entity to model."""
        return SlotModel(
            doctor_id=slot.doctor_id,
            slot_date=slot.slot_date,
            start_time=slot.start_time,
            end_time=slot.end_time,
            slot_range=slot.slot_range,
            status=slot.status,
        )

    def _update_model(self, model: SlotModel, slot: Slot) -> None:
        """Update model from entity."""
        model.start_time = slot.start_time  # type: ignore[assignment]
        model.end_time = slot.end_time  # type: ignore[assignment]
        model.slot_range = slot.slot_range  # type: ignore[assignment]
        model.status = slot.status  # type: ignore[assignment]
