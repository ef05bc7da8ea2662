"""
Cache Module

In-process caches shared across requests.
"""

from vaidya.core.cache.doctor_cache import DoctorCache, get_doctor_cache

__all__ = ["DoctorCache", "get_doctor_cache"]
