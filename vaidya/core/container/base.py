# ============================================================================
# SCOPE: GLOBAL
# Description: Base container with shared settings and the doctor cache.
# ============================================================================
"""
Base Container - Shared Singletons.

Single Responsibility: Hold settings and process-wide resources.
"""

import logging

from vaidya.config.settings import Settings, get_settings
from vaidya.core.cache.doctor_cache import DoctorCache, get_doctor_cache

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.

    Single Responsibility: Create and cache resources reused across requests.
    """

    def __init__(self, settings: Settings | None = None, doctor_cache: DoctorCache | None = None):
        """
        Initialize base container.

        Args:
            settings: Settings override (defaults to the cached settings)
            doctor_cache: Cache override (defaults to the module singleton)
        """
        self.settings = settings or get_settings()
        self._doctor_cache = doctor_cache

        logger.info("BaseContainer initialized")

    def get_doctor_cache(self) -> DoctorCache:
        """Get the doctor cache (singleton)."""
        if self._doctor_cache is None:
            self._doctor_cache = get_doctor_cache()
        return self._doctor_cache
