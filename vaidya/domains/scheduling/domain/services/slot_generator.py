"""
Slot Generator for Scheduling Domain

Domain service that divides a working window into fixed-length slots.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from vaidya.core.domain import ValidationException

from ..entities.slot import Slot
from ..value_objects.slot_status import SlotDuration

ONE_MINUTE = timedelta(minutes=1)


@dataclass
class SlotWindow:
    """A requested generation window for one doctor and date."""

    doctor_id: int
    slot_date: date
    start_time: time
    end_time: time
    duration: SlotDuration


class SlotGenerator:
    """
    Plans non-overlapping slots over a window.

    Each slot covers ``[current, current + duration - 1 minute]`` and the next
    one starts a minute after the previous end. A slot ending exactly at the
    window end is kept. Arithmetic runs on datetimes for the given date, so a
    window close to midnight never wraps into the next day.

    Example:
        ```python
        generator = SlotGenerator()
        window = generator.window(7, date(2025, 3, 10), time(9, 0), time(9, 29), "10 minutes")
        slots = generator.plan(window)  # 09:00-09:09, 09:10-09:19, 09:20-09:29
        ```
    """

    @staticmethod
    def parse_duration(slot_range: str) -> SlotDuration:
        """
        Parse a slot duration label.

        Raises:
            ValidationException: if the leading token is not a positive integer
        """
        try:
            return SlotDuration(slot_range)
        except ValueError as e:
            raise ValidationException(str(e), field="slot_range") from e

    def window(
        self,
        doctor_id: int,
        slot_date: date,
        start_time: time,
        end_time: time,
        slot_range: str,
    ) -> SlotWindow:
        return SlotWindow(
            doctor_id=doctor_id,
            slot_date=slot_date,
            start_time=start_time,
            end_time=end_time,
            duration=self.parse_duration(slot_range),
        )

    def plan(self, window: SlotWindow) -> list[Slot]:
        """Build the candidate slots for a window, in ascending order."""
        current = datetime.combine(window.slot_date, window.start_time)
        window_end = datetime.combine(window.slot_date, window.end_time)

        # Compared in whole minutes so an oversized duration never reaches datetime arithmetic
        if window.duration.minutes - 1 > (window_end - current) // ONE_MINUTE:
            return []

        span = window.duration.as_timedelta() - ONE_MINUTE
        slots: list[Slot] = []
        while span <= window_end - current:
            slot_end = current + span
            slots.append(
                Slot.create(
                    doctor_id=window.doctor_id,
                    slot_date=window.slot_date,
                    start_time=current.time(),
                    end_time=slot_end.time(),
                    slot_range=window.duration.label,
                )
            )
            if window_end - slot_end < ONE_MINUTE:
                break
            current = slot_end + ONE_MINUTE
        return slots
