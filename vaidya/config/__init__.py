"""
Configuration Module

Application settings and environment configuration.
"""

from vaidya.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
