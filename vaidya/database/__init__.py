"""
Database Module

Declarative base, async engine and session helpers.
"""

from vaidya.database.async_db import (
    dispose_engine,
    get_async_db,
    get_async_db_context,
    get_async_engine,
    init_models,
)
from vaidya.database.base import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "get_async_db",
    "get_async_db_context",
    "get_async_engine",
    "init_models",
    "dispose_engine",
]
