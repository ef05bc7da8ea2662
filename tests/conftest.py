"""
Shared pytest fixtures for all tests.

This module provides common fixtures for mocked database sessions,
in-memory repositories, the FastAPI application and sample entities.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DB_NAME"] = "vaidya_test"

from tests.utils.builders import DoctorBuilder, SlotBuilder  # noqa: E402
from tests.utils.fakes import (  # noqa: E402
    InMemoryDoctorRepository,
    InMemoryPatientRepository,
    InMemorySlotRepository,
)
from vaidya.core.container import reset_container  # noqa: E402


# ============================================================================
# GLOBAL STATE
# ============================================================================


@pytest.fixture(autouse=True)
def reset_global_container():
    """Drop the DI container singleton between tests."""
    reset_container()
    yield
    reset_container()


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    session.delete = AsyncMock()
    return session


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def sample_doctor():
    """Doctor with ID 1."""
    return DoctorBuilder().with_id(1).build()


@pytest.fixture
def sample_slot():
    """Available slot of doctor 1 on 2025-03-10, 09:00-09:09."""
    return SlotBuilder().with_id(1).for_doctor(1).build()


@pytest.fixture
def doctor_repository(sample_doctor):
    """In-memory doctor repository holding doctors 1 and 2."""
    other = DoctorBuilder().with_id(2).with_name("Dr. Vikram Shetty").with_specialization("Orthopedics").build()
    return InMemoryDoctorRepository([sample_doctor, other])


@pytest.fixture
def slot_repository(sample_slot):
    """In-memory slot repository holding the sample slot."""
    return InMemorySlotRepository([sample_slot])


@pytest.fixture
def patient_repository():
    """Empty in-memory patient repository."""
    return InMemoryPatientRepository()


# ============================================================================
# FASTAPI FIXTURES
# ============================================================================


@pytest.fixture
def fastapi_app():
    """Create FastAPI app for testing."""
    from vaidya.core.app_factory import create_app

    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Create test client for API testing; lifespan events are not run."""
    return TestClient(fastapi_app)
