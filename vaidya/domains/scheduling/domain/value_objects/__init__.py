"""
Scheduling Domain Value Objects

Immutable value objects for the scheduling domain.
"""

from vaidya.domains.scheduling.domain.value_objects.slot_status import (
    AadharNumber,
    MobileNumber,
    SlotDuration,
    SlotStatus,
)

__all__ = [
    "SlotStatus",
    "SlotDuration",
    "MobileNumber",
    "AadharNumber",
]
