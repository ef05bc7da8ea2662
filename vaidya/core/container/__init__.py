# ============================================================================
# SCOPE: GLOBAL
# Description: Process-wide container access for FastAPI dependencies.
# ============================================================================
"""
Dependency Injection Container.

Centralized container for creating and managing application dependencies.
Wires concrete repository implementations to the use cases that need them.
"""

import logging

from vaidya.config.settings import Settings

from .base import BaseContainer
from .scheduling import SchedulingContainer

logger = logging.getLogger(__name__)

_container: SchedulingContainer | None = None


def get_container(settings: Settings | None = None) -> SchedulingContainer:
    """
    Get global container instance (singleton).

    Args:
        settings: Optional settings override (only used on first call)

    Returns:
        SchedulingContainer instance
    """
    global _container

    if _container is None:
        logger.info("Initializing global SchedulingContainer")
        _container = SchedulingContainer(BaseContainer(settings))
    elif settings is not None:
        logger.warning(
            "Container already initialized, ignoring new settings. "
            "Call reset_container() first to change them."
        )

    return _container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global SchedulingContainer")
    _container = None


__all__ = [
    "BaseContainer",
    "SchedulingContainer",
    "get_container",
    "reset_container",
]
