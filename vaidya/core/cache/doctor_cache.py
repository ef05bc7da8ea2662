# ============================================================================
# SCOPE: GLOBAL
# Description: In-memory LRU cache for doctor lookups with a TTL.
#              Avoids repeated doctor queries while booking.
# ============================================================================
"""
Doctor Cache - In-memory cache for doctor lookups.

Bookings resolve the same doctors over and over; this cache keeps recently
used doctors in memory so each booking does not need another round trip.

Features:
- TTL-based expiration (600 seconds default)
- Bounded size with least-recently-used eviction (500 entries default)
- asyncio.Lock around every access
- Manual invalidation of one doctor or the whole cache

Usage:
    from vaidya.core.cache.doctor_cache import get_doctor_cache

    cache = get_doctor_cache()
    doctor = await cache.get(doctor_id)
    if doctor is None:
        doctor = await repository.find_by_id(doctor_id)
        if doctor is not None:
            await cache.put(doctor)

    # After a doctor changes
    await cache.invalidate(doctor_id)
"""

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass

from vaidya.domains.scheduling.domain.entities.doctor import Doctor

logger = logging.getLogger(__name__)


@dataclass
class _CacheEntry:
    doctor: Doctor
    stored_at: float


class DoctorCache:
    """
    Bounded TTL cache of doctors keyed by ID.

    Only found doctors are stored; a miss always goes back to the database.
    """

    DEFAULT_MAX_SIZE: int = 500
    DEFAULT_TTL_SECONDS: int = 600

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        """Initialize cache.

        Args:
            max_size: Maximum number of cached doctors
            ttl_seconds: Seconds an entry stays valid after it is written
        """
        self._max_size = max_size
        self._ttl_seconds = ttl_seconds
        self._entries: OrderedDict[int, _CacheEntry] = OrderedDict()
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    def _is_expired(self, entry: _CacheEntry) -> bool:
        return time.monotonic() - entry.stored_at >= self._ttl_seconds

    async def get(self, doctor_id: int) -> Doctor | None:
        """Get a cached doctor.

        Args:
            doctor_id: Doctor ID

        Returns:
            Doctor if cached and fresh, None otherwise
        """
        async with self._lock:
            entry = self._entries.get(doctor_id)
            if entry is None:
                self._misses += 1
                return None
            if self._is_expired(entry):
                del self._entries[doctor_id]
                self._misses += 1
                return None

            self._entries.move_to_end(doctor_id)
            self._hits += 1
            return entry.doctor

    async def put(self, doctor: Doctor) -> None:
        """Store a doctor, evicting the least recently used entry when full."""
        if doctor.id is None:
            return
        async with self._lock:
            self._entries[doctor.id] = _CacheEntry(doctor=doctor, stored_at=time.monotonic())
            self._entries.move_to_end(doctor.id)
            while len(self._entries) > self._max_size:
                evicted_id, _ = self._entries.popitem(last=False)
                logger.debug(f"Doctor cache evicted doctor {evicted_id}")

    async def invalidate(self, doctor_id: int | None = None) -> None:
        """Drop one doctor, or everything when no ID is given."""
        async with self._lock:
            if doctor_id is None:
                self._entries.clear()
                logger.debug("Doctor cache cleared")
            else:
                self._entries.pop(doctor_id, None)
                logger.debug(f"Doctor cache invalidated for doctor {doctor_id}")

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dict with cache size, limits, hits and misses
        """
        return {
            "size": len(self._entries),
            "max_size": self._max_size,
            "ttl_seconds": self._ttl_seconds,
            "hits": self._hits,
            "misses": self._misses,
        }


# Singleton instance
_doctor_cache: DoctorCache | None = None


def get_doctor_cache() -> DoctorCache:
    """Get the process-wide doctor cache, sized from settings."""
    global _doctor_cache
    if _doctor_cache is None:
        from vaidya.config.settings import get_settings

        settings = get_settings()
        _doctor_cache = DoctorCache(
            max_size=settings.DOCTOR_CACHE_MAX_SIZE,
            ttl_seconds=settings.DOCTOR_CACHE_TTL_SECONDS,
        )
    return _doctor_cache
