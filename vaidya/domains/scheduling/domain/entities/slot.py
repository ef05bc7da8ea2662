"""
Slot Entity for Scheduling Domain

A fixed-length appointment window on one doctor's calendar.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any

from vaidya.core.domain import AggregateRoot, InvalidOperationException

from ..value_objects.slot_status import SlotStatus


@dataclass
class Slot(AggregateRoot[int]):
    """
    Slot aggregate root.

    Bounds are inclusive: a 10 minute slot starting at 09:00 ends at 09:09.

    Example:
        ```python
        slot = Slot.create(
            doctor_id=7,
            slot_date=date(2025, 3, 10),
            start_time=time(9, 0),
            end_time=time(9, 9),
            slot_range="10 minutes",
        )
        slot.mark_booked()
        ```
    """

    doctor_id: int = 0
    slot_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    slot_range: str = ""
    status: SlotStatus = field(default=SlotStatus.AVAILABLE)

    @property
    def starts_at(self) -> datetime | None:
        """Slot start as a datetime."""
        if self.slot_date and self.start_time:
            return datetime.combine(self.slot_date, self.start_time)
        return None

    def is_available(self) -> bool:
        return self.status.is_available()

    def belongs_to(self, doctor_id: int) -> bool:
        return self.doctor_id == doctor_id

    def overlaps(self, start_time: time, end_time: time) -> bool:
        """Check overlap with another window on the same day, bounds inclusive."""
        if self.start_time is None or self.end_time is None:
            return False
        return self.start_time <= end_time and self.end_time >= start_time

    def mark_booked(self) -> None:
        """Claim the slot for a patient."""
        if not self.is_available():
            raise InvalidOperationException(
                operation="book",
                current_state=self.status.value,
                message=f"Slot ID: {self.id} is not available for booking",
            )
        self.status = SlotStatus.BOOKED
        self.touch()

    def change_status(self, status: SlotStatus) -> None:
        """Overwrite the status (administrative update)."""
        self.status = status
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "doctor_id": self.doctor_id,
            "date": self.slot_date.isoformat() if self.slot_date else None,
            "start_time": self.start_time.strftime("%H:%M") if self.start_time else None,
            "end_time": self.end_time.strftime("%H:%M") if self.end_time else None,
            "slot_range": self.slot_range,
            "status": self.status.value,
        }

    @classmethod
    def create(
        cls,
        doctor_id: int,
        slot_date: date,
        start_time: time,
        end_time: time,
        slot_range: str,
    ) -> "Slot":
        """Factory method for a freshly generated, available slot."""
        return cls(
            doctor_id=doctor_id,
            slot_date=slot_date,
            start_time=start_time,
            end_time=end_time,
            slot_range=slot_range,
            status=SlotStatus.AVAILABLE,
        )
