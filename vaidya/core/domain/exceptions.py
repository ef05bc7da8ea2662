"""
Domain Exceptions

These exceptions represent business rule violations and domain-specific errors.
They are raised by use cases and translated to HTTP responses in the API layer
(see vaidya.api.exception_handlers).
"""

from datetime import date, time
from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "SLOT_ALREADY_BOOKED")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when input validation fails.

    Covers malformed dates, phone/email/Aadhar formats, slot duration labels
    and missing doctor/slot references.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} not found with ID: {entity_id}"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class DuplicateEntityException(DomainException):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{value}' already exists",
            "DUPLICATE_ENTITY",
            {
                "entity_type": entity_type,
                "field": field,
                "value": str(value),
            },
        )


class SlotAlreadyBookedException(DomainException):
    """Raised when a patient is already bound to the requested slot."""

    def __init__(self, slot_id: int, message: str | None = None):
        self.slot_id = slot_id
        msg = message or f"Slot ID: {slot_id} is already booked. Please choose another slot."
        super().__init__(msg, "SLOT_ALREADY_BOOKED", {"slot_id": slot_id})


class SlotOverlapException(DomainException):
    """Raised when a generated slot collides with an existing slot of the same doctor and date."""

    def __init__(
        self,
        doctor_id: int,
        slot_date: date,
        start_time: time | None = None,
        end_time: time | None = None,
    ):
        self.doctor_id = doctor_id
        self.slot_date = slot_date
        self.start_time = start_time
        self.end_time = end_time
        details: dict[str, Any] = {
            "doctor_id": doctor_id,
            "date": slot_date.isoformat(),
        }
        if start_time and end_time:
            details["time_slot"] = f"{start_time.strftime('%H:%M')}-{end_time.strftime('%H:%M')}"
        super().__init__(
            f"Cannot create overlapping slot for doctor ID: {doctor_id} on {slot_date.isoformat()}",
            "SLOT_OVERLAP",
            details,
        )
