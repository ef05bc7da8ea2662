"""
Doctor Entity for Scheduling Domain

Read-only view of a doctor account, owned by the accounts service.
"""

from dataclasses import dataclass
from datetime import time
from typing import Any

from vaidya.core.domain import AggregateRoot


@dataclass
class Doctor(AggregateRoot[int]):
    """
    Doctor referenced by slots and patients.

    Example:
        ```python
        doctor = Doctor(
            full_name="Dr. Asha Rao",
            email="asha.rao@clinic.in",
            specialization="Cardiology",
            open_time=time(9, 0),
            close_time=time(17, 0),
        )
        ```
    """

    full_name: str = ""
    email: str = ""
    specialization: str | None = None
    qualification: str | None = None
    experience: int | None = None
    phone_number: str | None = None
    gender: str | None = None
    address: str | None = None
    clinic_name: str | None = None
    open_time: time | None = None
    close_time: time | None = None
    is_enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "specialization": self.specialization,
            "qualification": self.qualification,
            "experience": self.experience,
            "phone_number": self.phone_number,
            "clinic_name": self.clinic_name,
            "open_time": self.open_time.strftime("%H:%M") if self.open_time else None,
            "close_time": self.close_time.strftime("%H:%M") if self.close_time else None,
            "is_enabled": self.is_enabled,
        }
