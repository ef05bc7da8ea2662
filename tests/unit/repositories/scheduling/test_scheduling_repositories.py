"""
Unit tests for Scheduling Domain Repositories.

Tests the data access layer for slots, patients and doctors.
"""

from datetime import UTC, date, datetime, time
from unittest.mock import MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError

from vaidya.core.domain import DuplicateEntityException
from vaidya.domains.scheduling.domain.entities import Patient, Slot
from vaidya.domains.scheduling.domain.value_objects import SlotStatus
from vaidya.domains.scheduling.infrastructure.persistence.sqlalchemy.models import PatientModel, SlotModel
from vaidya.domains.scheduling.infrastructure.repositories import (
    SQLAlchemyDoctorRepository,
    SQLAlchemyPatientRepository,
    SQLAlchemySlotRepository,
)


def _compiled(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def sample_slot_model():
    """Sample SQLAlchemy slot model."""
    model = MagicMock()
    model.id = 11
    model.doctor_id = 1
    model.slot_date = date(2025, 3, 10)
    model.start_time = time(9, 0)
    model.end_time = time(9, 9)
    model.slot_range = "10 minutes"
    model.status = SlotStatus.AVAILABLE
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    return model


@pytest.fixture
def sample_patient_model():
    """Sample SQLAlchemy patient model."""
    model = MagicMock()
    model.id = 21
    model.name = "Ravi Kumar"
    model.phone_number = "9876543210"
    model.email = "ravi.kumar@example.com"
    model.aadhar_number = "234567890123"
    model.age = 34
    model.address = "12 MG Road"
    model.appointment_at = datetime(2025, 3, 10, 9, 0)
    model.role_id = None
    model.doctor_id = 1
    model.slot_id = 11
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    return model


@pytest.fixture
def sample_doctor_model():
    """Sample SQLAlchemy doctor model."""
    model = MagicMock()
    model.id = 1
    model.full_name = "Dr. Asha Rao"
    model.email = "asha.rao@vaidya.clinic"
    model.specialization = "Cardiology"
    model.qualification = "MBBS, MD"
    model.experience = 12
    model.phone_number = "9845012345"
    model.gender = "Female"
    model.address = None
    model.clinic_name = "Vaidya Heart Care"
    model.open_time = time(9, 0)
    model.close_time = time(17, 0)
    model.is_enabled = True
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    return model


# ============================================================================
# Slot Repository Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_slot_find_by_id_success(mock_async_session, sample_slot_model):
    """Test successfully getting a slot by ID."""
    # Arrange
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = sample_slot_model
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemySlotRepository(mock_async_session)

    # Act
    slot = await repository.find_by_id(11)

    # Assert
    assert slot is not None
    assert slot.id == 11
    assert slot.start_time == time(9, 0)
    assert slot.status == SlotStatus.AVAILABLE
    mock_async_session.execute.assert_called_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_slot_find_by_id_not_found(mock_async_session):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = None
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemySlotRepository(mock_async_session)

    assert await repository.find_by_id(999) is None


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_slot_find_by_doctor_and_date(mock_async_session, sample_slot_model):
    # Arrange
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = [sample_slot_model]
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemySlotRepository(mock_async_session)

    # Act
    slots = await repository.find_by_doctor_and_date(1, date(2025, 3, 10))

    # Assert
    assert len(slots) == 1
    assert slots[0].doctor_id == 1


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
@pytest.mark.parametrize("row, expected", [(5, True), (None, False)])
async def test_slot_exists_overlap(mock_async_session, row, expected):
    """Test the overlap check reports whether any row matched."""
    # Arrange
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = row
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemySlotRepository(mock_async_session)

    # Act
    overlapping = await repository.exists_overlap(1, date(2025, 3, 10), time(9, 9), time(9, 0))

    # Assert
    assert overlapping is expected
    statement = _compiled(mock_async_session.execute.call_args.args[0])
    assert "slots.start_time <=" in statement
    assert "slots.end_time >=" in statement


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_slot_save_all_commits_once(mock_async_session):
    """Test a batch is added together and committed once."""
    # Arrange
    slots = [
        Slot.create(1, date(2025, 3, 10), time(9, 0), time(9, 9), "10 minutes"),
        Slot.create(1, date(2025, 3, 10), time(9, 10), time(9, 19), "10 minutes"),
    ]
    repository = SQLAlchemySlotRepository(mock_async_session)

    # Act
    saved = await repository.save_all(slots)

    # Assert
    mock_async_session.add_all.assert_called_once()
    added = mock_async_session.add_all.call_args.args[0]
    assert all(isinstance(m, SlotModel) for m in added)
    mock_async_session.commit.assert_awaited_once()
    assert mock_async_session.refresh.await_count == 2
    assert [s.start_time for s in saved] == [time(9, 0), time(9, 10)]


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
@pytest.mark.parametrize("rowcount, expected", [(1, True), (0, False)])
async def test_slot_mark_booked_is_conditional(mock_async_session, rowcount, expected):
    """Test the claim only succeeds when the UPDATE touched a row, and does not commit."""
    # Arrange
    mock_result = MagicMock()
    mock_result.rowcount = rowcount
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemySlotRepository(mock_async_session)

    # Act
    claimed = await repository.mark_booked(11)

    # Assert
    assert claimed is expected
    statement = _compiled(mock_async_session.execute.call_args.args[0])
    assert statement.startswith("UPDATE slots")
    assert "slots.status =" in statement
    mock_async_session.commit.assert_not_called()


# ============================================================================
# Patient Repository Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_find_by_phone(mock_async_session, sample_patient_model):
    # Arrange
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = [sample_patient_model]
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemyPatientRepository(mock_async_session)

    # Act
    patients = await repository.find_by_phone("9876543210")

    # Assert
    assert len(patients) == 1
    assert patients[0].name == "Ravi Kumar"
    assert patients[0].slot_id == 11


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_find_first_by_slot(mock_async_session, sample_patient_model):
    mock_result = MagicMock()
    mock_result.scalars.return_value.first.return_value = sample_patient_model
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemyPatientRepository(mock_async_session)

    patient = await repository.find_first_by_slot(11)

    assert patient is not None
    assert patient.id == 21


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_find_by_doctor_and_date_range(mock_async_session, sample_patient_model):
    # Arrange
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = [sample_patient_model]
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemyPatientRepository(mock_async_session)

    # Act
    patients = await repository.find_by_doctor_and_date_range(
        1, datetime(2025, 3, 10, 0, 0), datetime(2025, 3, 10, 23, 59, 59)
    )

    # Assert
    assert len(patients) == 1
    statement = _compiled(mock_async_session.execute.call_args.args[0])
    assert "BETWEEN" in statement


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_save_new(mock_async_session):
    """Test saving a new patient adds a model and commits."""
    # Arrange
    patient = Patient(
        name="Ravi Kumar",
        phone_number="9876543210",
        email="ravi.kumar@example.com",
        aadhar_number="234567890123",
        doctor_id=1,
        slot_id=11,
    )
    repository = SQLAlchemyPatientRepository(mock_async_session)

    # Act
    saved = await repository.save(patient)

    # Assert
    mock_async_session.add.assert_called_once()
    added = mock_async_session.add.call_args.args[0]
    assert isinstance(added, PatientModel)
    assert added.slot_id == 11
    mock_async_session.commit.assert_awaited_once()
    assert saved.name == "Ravi Kumar"


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_save_duplicate_slot(mock_async_session):
    """Test a unique slot violation rolls back and raises DuplicateEntityException."""
    # Arrange
    mock_async_session.commit.side_effect = IntegrityError(
        "INSERT INTO patients",
        {},
        Exception('duplicate key value violates unique constraint "uq_patients_slot_id"'),
    )
    patient = Patient(
        name="Priya Nair",
        phone_number="9123456780",
        email="priya@example.com",
        aadhar_number="345678901234",
        doctor_id=1,
        slot_id=11,
    )
    repository = SQLAlchemyPatientRepository(mock_async_session)

    # Act & Assert
    with pytest.raises(DuplicateEntityException) as exc_info:
        await repository.save(patient)

    assert exc_info.value.field == "slot_id"
    mock_async_session.rollback.assert_awaited_once()
    mock_async_session.refresh.assert_not_called()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_save_other_integrity_error_is_not_a_duplicate(mock_async_session):
    """Test a constraint other than the slot uniqueness is re-raised unchanged."""
    # Arrange
    mock_async_session.commit.side_effect = IntegrityError(
        "UPDATE patients",
        {},
        Exception('null value in column "name" of relation "patients" violates not-null constraint'),
    )
    patient = Patient(
        id=3,
        name="Priya Nair",
        phone_number="9123456780",
        email="priya@example.com",
        aadhar_number="345678901234",
        doctor_id=1,
        slot_id=11,
    )
    repository = SQLAlchemyPatientRepository(mock_async_session)
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    mock_async_session.execute.return_value = result

    # Act & Assert
    with pytest.raises(IntegrityError):
        await repository.save(patient)

    mock_async_session.rollback.assert_awaited_once()
    mock_async_session.refresh.assert_not_called()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_update_keeps_binding(mock_async_session, sample_patient_model):
    """Test an update copies personal fields but never the doctor or slot."""
    # Arrange
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = sample_patient_model
    mock_async_session.execute.return_value = mock_result
    patient = Patient(
        id=21,
        name="Ravi K.",
        phone_number="9876543210",
        email="ravi.kumar@example.com",
        aadhar_number="234567890123",
        doctor_id=2,
        slot_id=99,
    )
    repository = SQLAlchemyPatientRepository(mock_async_session)

    # Act
    await repository.save(patient)

    # Assert
    assert sample_patient_model.name == "Ravi K."
    assert sample_patient_model.doctor_id == 1
    assert sample_patient_model.slot_id == 11
    mock_async_session.add.assert_not_called()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_patient_delete(mock_async_session, sample_patient_model):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = sample_patient_model
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemyPatientRepository(mock_async_session)

    assert await repository.delete(21) is True
    mock_async_session.delete.assert_awaited_once_with(sample_patient_model)
    mock_async_session.commit.assert_awaited_once()


# ============================================================================
# Doctor Repository Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_doctor_find_by_id(mock_async_session, sample_doctor_model):
    # Arrange
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = sample_doctor_model
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemyDoctorRepository(mock_async_session)

    # Act
    doctor = await repository.find_by_id(1)

    # Assert
    assert doctor is not None
    assert doctor.full_name == "Dr. Asha Rao"
    assert doctor.open_time == time(9, 0)
    assert "FOR UPDATE" not in _compiled(mock_async_session.execute.call_args.args[0])


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_doctor_find_by_id_for_update_locks_row(mock_async_session, sample_doctor_model):
    """Test a locking read issues SELECT ... FOR UPDATE."""
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = sample_doctor_model
    mock_async_session.execute.return_value = mock_result

    repository = SQLAlchemyDoctorRepository(mock_async_session)

    await repository.find_by_id(1, for_update=True)

    assert "FOR UPDATE" in _compiled(mock_async_session.execute.call_args.args[0])
