"""
Scheduling Domain Services

Stateless domain logic that spans entities.
"""

from vaidya.domains.scheduling.domain.services.slot_generator import SlotGenerator, SlotWindow

__all__ = [
    "SlotGenerator",
    "SlotWindow",
]
