"""
Scheduling Domain Value Objects

Status enum and validated primitives for slots and patient contact data.
"""

import re
from dataclasses import dataclass
from datetime import timedelta

from vaidya.core.domain import StatusEnum, ValueObject

MOBILE_PATTERN = re.compile(r"^[6-9]\d{9}$")
AADHAR_PATTERN = re.compile(r"^[2-9]\d{11}$")


class SlotStatus(StatusEnum):
    """
    Slot availability.

    A slot starts AVAILABLE and becomes BOOKED when a patient claims it.
    """

    AVAILABLE = "available"
    BOOKED = "booked"

    def is_available(self) -> bool:
        """Check if the slot can still be claimed."""
        return self is SlotStatus.AVAILABLE


@dataclass(frozen=True)
class SlotDuration(ValueObject):
    """
    Length of a generated slot, parsed from a label such as ``"10 minutes"``.

    Only the first whitespace-separated token is read, as a number of minutes.
    """

    label: str

    def _validate(self) -> None:
        minutes = self._parse(self.label)
        if minutes <= 0:
            raise ValueError(f"Slot duration must be positive: {self.label}")

    @staticmethod
    def _parse(label: str) -> int:
        tokens = (label or "").split()
        if not tokens:
            raise ValueError("Slot duration is required")
        try:
            return int(tokens[0])
        except ValueError as e:
            raise ValueError(f"Invalid slot duration: {label}") from e

    @property
    def minutes(self) -> int:
        return self._parse(self.label)

    def as_timedelta(self) -> timedelta:
        return timedelta(minutes=self.minutes)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class MobileNumber(ValueObject):
    """Indian mobile number: ten digits starting with 6-9."""

    number: str

    def _validate(self) -> None:
        if not self.number or not MOBILE_PATTERN.match(self.number):
            raise ValueError(f"Invalid phone number: {self.number}")

    def __str__(self) -> str:
        return self.number


@dataclass(frozen=True)
class AadharNumber(ValueObject):
    """Aadhar national ID: twelve digits, first digit 2-9."""

    number: str

    def _validate(self) -> None:
        if not self.number or not AADHAR_PATTERN.match(self.number):
            raise ValueError(f"Invalid Aadhar number: {self.number}")

    def __str__(self) -> str:
        return self.number
