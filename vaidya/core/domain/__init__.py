"""
Core Domain Building Blocks

Base entities, value objects and exceptions shared by every domain.
"""

from vaidya.core.domain.entities import AggregateRoot, Entity
from vaidya.core.domain.exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidOperationException,
    SlotAlreadyBookedException,
    SlotOverlapException,
    ValidationException,
)
from vaidya.core.domain.value_objects import Email, StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    "Email",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "InvalidOperationException",
    "DuplicateEntityException",
    "SlotAlreadyBookedException",
    "SlotOverlapException",
]
