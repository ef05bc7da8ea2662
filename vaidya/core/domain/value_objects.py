"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity

    Example:
        ```python
        @dataclass(frozen=True)
        class MobileNumber(ValueObject):
            number: str

            def _validate(self) -> None:
                if not self.number.isdigit():
                    raise ValueError("Invalid phone number")
        ```
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Accepts letters, digits and ``+_.-`` in the local part and letters,
    digits, dots and hyphens in the domain.
    """

    address: str

    def _validate(self) -> None:
        if not self.address or not EMAIL_PATTERN.match(self.address):
            raise ValueError(f"Invalid email address: {self.address}")

    def __str__(self) -> str:
        return self.address


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")
