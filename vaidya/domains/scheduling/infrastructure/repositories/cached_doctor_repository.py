# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Scheduling)
# Description: Doctor repository decorator backed by the in-memory doctor cache.
# ============================================================================
"""
Cached Doctor Repository

IDoctorRepository decorator that serves reads from the doctor cache.
"""

import logging

from vaidya.core.cache.doctor_cache import DoctorCache
from vaidya.domains.scheduling.application.ports.doctor_repository import IDoctorRepository
from vaidya.domains.scheduling.domain.entities.doctor import Doctor

logger = logging.getLogger(__name__)


class CachedDoctorRepository(IDoctorRepository):
    """
    Doctor repository backed by an in-memory cache.

    Locking reads always hit the database so the row lock is taken; their
    result refreshes the cache.
    """

    def __init__(self, repository: IDoctorRepository, cache: DoctorCache):
        """
        Args:
            repository: Repository that reads from the database
            cache: Shared doctor cache
        """
        self._repository = repository
        self._cache = cache

    async def find_by_id(self, doctor_id: int, for_update: bool = False) -> Doctor | None:
        if not for_update:
            cached = await self._cache.get(doctor_id)
            if cached is not None:
                return cached

        doctor = await self._repository.find_by_id(doctor_id, for_update=for_update)
        if doctor is not None:
            await self._cache.put(doctor)
        return doctor

    async def save(self, doctor: Doctor) -> Doctor:
        saved = await self._repository.save(doctor)
        await self._cache.put(saved)
        return saved
