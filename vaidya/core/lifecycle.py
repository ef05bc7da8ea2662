"""
Application lifecycle management using modern FastAPI lifespan pattern.

This module follows SRP by handling only application startup/shutdown logic.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vaidya.config.settings import get_settings
from vaidya.core.cache.doctor_cache import get_doctor_cache
from vaidya.database.async_db import dispose_engine, init_models

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self) -> None:
        """Initialize lifecycle manager."""
        self._initialized = False

    async def startup(self) -> None:
        """
        Execute startup tasks.

        Called when the application starts.
        """
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")
        settings = get_settings()

        self._verify_configurations()

        if settings.DB_CREATE_TABLES:
            await init_models()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """
        Execute shutdown tasks.

        Called when the application stops.
        """
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")

        await get_doctor_cache().invalidate()
        await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Log configuration that affects behaviour at runtime."""
        settings = get_settings()
        if not settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not configured - error tracking disabled")
        if not settings.DB_PASSWORD:
            logger.warning("DB_PASSWORD not configured - connecting without a password")
        logger.info(
            f"Doctor cache: max_size={settings.DOCTOR_CACHE_MAX_SIZE}, ttl={settings.DOCTOR_CACHE_TTL_SECONDS}s"
        )


_lifecycle_manager = LifecycleManager()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    await _lifecycle_manager.startup()
    try:
        yield
    finally:
        await _lifecycle_manager.shutdown()
