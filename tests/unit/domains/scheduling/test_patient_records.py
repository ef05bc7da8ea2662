"""
Unit tests for Patient Records Use Cases.

Tests:
- GetPatientUseCase / ListPatientsUseCase
- UpdatePatientUseCase
- DeletePatientUseCase
- SearchPatientsUseCase
"""

from datetime import date, datetime, timedelta, timezone

import pytest
import pytest_asyncio

from vaidya.core.domain import EntityNotFoundException, ValidationException
from vaidya.domains.scheduling.application.use_cases import (
    DeletePatientUseCase,
    GetPatientUseCase,
    ListPatientsUseCase,
    SearchPatientsUseCase,
    UpdatePatientRequest,
    UpdatePatientUseCase,
)
from vaidya.domains.scheduling.domain.entities import Patient
from tests.utils.fakes import InMemoryPatientRepository


# ============================================================================
# FIXTURES
# ============================================================================


def _patient(slot_id: int, doctor_id: int, appointment_at: datetime, phone_number: str = "9876543210") -> Patient:
    return Patient(
        name=f"Patient {slot_id}",
        phone_number=phone_number,
        email=f"patient{slot_id}@example.com",
        aadhar_number="234567890123",
        appointment_at=appointment_at,
        doctor_id=doctor_id,
        slot_id=slot_id,
    )


@pytest_asyncio.fixture
async def populated_repository():
    """Four patients across two doctors and three days."""
    repo = InMemoryPatientRepository()
    await repo.save(_patient(1, 1, datetime(2025, 3, 10, 9, 0)))
    await repo.save(_patient(2, 1, datetime(2025, 3, 10, 23, 59)))
    await repo.save(_patient(3, 1, datetime(2025, 3, 12, 0, 0), phone_number="9123456780"))
    await repo.save(_patient(4, 2, datetime(2025, 3, 10, 10, 0)))
    return repo


# ============================================================================
# Get / List Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_patient(populated_repository):
    patient = await GetPatientUseCase(populated_repository).execute(2)

    assert patient.slot_id == 2


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_patient_not_found(patient_repository):
    with pytest.raises(EntityNotFoundException) as exc_info:
        await GetPatientUseCase(patient_repository).execute(77)

    assert exc_info.value.message == "Patient not found with ID: 77"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_list_patients(populated_repository):
    patients = await ListPatientsUseCase(populated_repository).execute()

    assert [p.id for p in patients] == [1, 2, 3, 4]


# ============================================================================
# UpdatePatientUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_patient_changes_fields(populated_repository):
    """Test personal fields change and the slot binding does not."""
    # Arrange
    use_case = UpdatePatientUseCase(populated_repository)
    request = UpdatePatientRequest(
        patient_id=1,
        changes={"name": "Ravi Kumar", "phone_number": "7000000001", "slot_id": 3},
    )

    # Act
    patient = await use_case.execute(request)

    # Assert
    assert patient.name == "Ravi Kumar"
    assert patient.phone_number == "7000000001"
    assert patient.slot_id == 1
    assert (await populated_repository.find_by_id(1)).phone_number == "7000000001"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_patient_revalidates_contact(populated_repository):
    use_case = UpdatePatientUseCase(populated_repository)

    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(UpdatePatientRequest(patient_id=1, changes={"phone_number": "12345"}))

    assert exc_info.value.field == "phone_number"
    assert (await populated_repository.find_by_id(1)).phone_number == "9876543210"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_patient_rejects_null_name(populated_repository):
    """Test clearing the name is a validation error and the record is untouched."""
    use_case = UpdatePatientUseCase(populated_repository)

    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(UpdatePatientRequest(patient_id=1, changes={"name": None}))

    assert exc_info.value.field == "name"
    assert (await populated_repository.find_by_id(1)).name is not None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_patient_rejects_appointment_with_offset(populated_repository):
    use_case = UpdatePatientUseCase(populated_repository)
    aware = datetime(2025, 3, 11, 10, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))

    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(UpdatePatientRequest(patient_id=1, changes={"appointment_at": aware}))

    assert exc_info.value.field == "appointment_at"
    assert (await populated_repository.find_by_id(1)).appointment_at.tzinfo is None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_patient_not_found(patient_repository):
    with pytest.raises(EntityNotFoundException):
        await UpdatePatientUseCase(patient_repository).execute(UpdatePatientRequest(patient_id=9))


# ============================================================================
# DeletePatientUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_patient(populated_repository):
    await DeletePatientUseCase(populated_repository).execute(3)

    assert await populated_repository.find_by_id(3) is None
    assert len(populated_repository.patients) == 3


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_patient_not_found(patient_repository):
    with pytest.raises(EntityNotFoundException):
        await DeletePatientUseCase(patient_repository).execute(3)


# ============================================================================
# SearchPatientsUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_search_by_phone_and_doctor(populated_repository):
    use_case = SearchPatientsUseCase(populated_repository)

    by_phone = await use_case.by_phone("9123456780")
    by_doctor = await use_case.by_doctor(1)

    assert [p.slot_id for p in by_phone] == [3]
    assert sorted(p.slot_id for p in by_doctor) == [1, 2, 3]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_search_by_doctor_and_date_covers_whole_day(populated_repository):
    """Test a single date matches appointments from 00:00 to 23:59."""
    use_case = SearchPatientsUseCase(populated_repository)

    patients = await use_case.by_doctor_and_date(1, date(2025, 3, 10))

    assert sorted(p.slot_id for p in patients) == [1, 2]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_search_by_doctor_and_date_range_includes_both_ends(populated_repository):
    use_case = SearchPatientsUseCase(populated_repository)

    patients = await use_case.by_doctor_and_date_range(1, date(2025, 3, 10), date(2025, 3, 12))
    none_found = await use_case.by_doctor_and_date_range(1, date(2025, 3, 11), date(2025, 3, 11))

    assert sorted(p.slot_id for p in patients) == [1, 2, 3]
    assert none_found == []


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_search_by_date_range_rejects_inverted_range(populated_repository):
    use_case = SearchPatientsUseCase(populated_repository)

    with pytest.raises(ValidationException) as exc_info:
        await use_case.by_doctor_and_date_range(1, date(2025, 3, 12), date(2025, 3, 10))

    assert exc_info.value.field == "end_date"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_search_by_slot(populated_repository):
    use_case = SearchPatientsUseCase(populated_repository)

    assert [p.id for p in await use_case.by_slot(4)] == [4]
    assert await use_case.by_slot(99) == []
