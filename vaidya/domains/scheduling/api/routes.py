"""
Scheduling API Routes

FastAPI routers for slot and patient endpoints.
Domain exceptions raised by the use cases are translated by the
handlers in vaidya.api.exception_handlers.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from vaidya.core.domain import ValidationException
from vaidya.domains.scheduling.api.dependencies import (
    get_book_slot_use_case,
    get_check_slot_availability_use_case,
    get_delete_patient_use_case,
    get_generate_slots_use_case,
    get_list_patients_use_case,
    get_patient_use_case,
    get_search_patients_use_case,
    get_slots_use_case,
    get_update_patient_use_case,
    get_update_slot_status_use_case,
)
from vaidya.domains.scheduling.api.schemas import (
    BookingResponse,
    DoctorSummary,
    PatientCreateRequest,
    PatientResponse,
    PatientUpdateRequest,
    SlotCreateRequest,
    SlotResponse,
)
from vaidya.domains.scheduling.application.use_cases import (
    BookSlotRequest,
    BookSlotUseCase,
    CheckSlotAvailabilityUseCase,
    DeletePatientUseCase,
    GenerateSlotsRequest,
    GenerateSlotsUseCase,
    GetPatientUseCase,
    GetSlotsUseCase,
    ListPatientsUseCase,
    SearchPatientsUseCase,
    UpdatePatientRequest,
    UpdatePatientUseCase,
    UpdateSlotStatusRequest,
    UpdateSlotStatusUseCase,
)

slots_router = APIRouter(prefix="/slots", tags=["Slots"])
patients_router = APIRouter(prefix="/patients", tags=["Patients"])

# Type aliases for use case dependencies
GenerateSlotsUseCaseDep = Annotated[GenerateSlotsUseCase, Depends(get_generate_slots_use_case)]
CheckSlotAvailabilityUseCaseDep = Annotated[
    CheckSlotAvailabilityUseCase, Depends(get_check_slot_availability_use_case)
]
UpdateSlotStatusUseCaseDep = Annotated[UpdateSlotStatusUseCase, Depends(get_update_slot_status_use_case)]
GetSlotsUseCaseDep = Annotated[GetSlotsUseCase, Depends(get_slots_use_case)]
BookSlotUseCaseDep = Annotated[BookSlotUseCase, Depends(get_book_slot_use_case)]
GetPatientUseCaseDep = Annotated[GetPatientUseCase, Depends(get_patient_use_case)]
ListPatientsUseCaseDep = Annotated[ListPatientsUseCase, Depends(get_list_patients_use_case)]
UpdatePatientUseCaseDep = Annotated[UpdatePatientUseCase, Depends(get_update_patient_use_case)]
DeletePatientUseCaseDep = Annotated[DeletePatientUseCase, Depends(get_delete_patient_use_case)]
SearchPatientsUseCaseDep = Annotated[SearchPatientsUseCase, Depends(get_search_patients_use_case)]


def _parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValidationException(f"Invalid date format: {value}", field=field) from e


# ==================== SLOTS ====================


@slots_router.post("/create", response_model=list[SlotResponse], status_code=status.HTTP_201_CREATED)
async def create_slots(request: SlotCreateRequest, use_case: GenerateSlotsUseCaseDep):
    """Generate slots for a doctor over a time window."""
    result = await use_case.execute(
        GenerateSlotsRequest(
            doctor_id=request.doctor_id,
            slot_date=request.slot_date,
            start_time=request.start_time,
            end_time=request.end_time,
            slot_range=request.slot_range,
        )
    )
    return [SlotResponse.from_entity(slot) for slot in result.slots]


@slots_router.put("/{slot_id}", response_model=SlotResponse)
async def update_slot_status(
    slot_id: int,
    use_case: UpdateSlotStatusUseCaseDep,
    slot_status: Annotated[str, Query(alias="status")],
):
    """Overwrite the status of a slot."""
    slot = await use_case.execute(UpdateSlotStatusRequest(slot_id=slot_id, status=slot_status))
    return SlotResponse.from_entity(slot)


@slots_router.get("/{slot_id}/availability", response_model=bool)
async def is_slot_available(slot_id: int, use_case: CheckSlotAvailabilityUseCaseDep):
    """Tell whether a slot can still be booked."""
    return await use_case.execute(slot_id)


@slots_router.get("/by-date", response_model=list[SlotResponse])
async def get_slots_by_date(
    use_case: GetSlotsUseCaseDep,
    slot_date: Annotated[date, Query(alias="date")],
):
    """List every slot on a date."""
    slots = await use_case.by_date(slot_date)
    if not slots:
        raise HTTPException(status_code=404, detail="No slots found for the given date.")
    return [SlotResponse.from_entity(slot) for slot in slots]


@slots_router.get("/search", response_model=list[SlotResponse])
async def get_slots_by_doctor_and_date(
    use_case: GetSlotsUseCaseDep,
    slot_date: Annotated[date, Query(alias="date")],
    doctor_id: int,
):
    """List a doctor's slots on a date."""
    slots = await use_case.by_doctor_and_date(slot_date, doctor_id)
    if not slots:
        raise HTTPException(status_code=404, detail="No slots found for the given date and doctor.")
    return [SlotResponse.from_entity(slot) for slot in slots]


# ==================== PATIENTS ====================


@patients_router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def book_slot(request: PatientCreateRequest, use_case: BookSlotUseCaseDep):
    """Book a slot for a new patient."""
    result = await use_case.execute(BookSlotRequest(**request.model_dump()))
    return BookingResponse(
        **PatientResponse.from_entity(result.patient).model_dump(),
        doctor=DoctorSummary.from_entity(result.doctor),
        slot=SlotResponse.from_entity(result.slot),
    )


@patients_router.get("", response_model=list[PatientResponse])
async def list_patients(use_case: ListPatientsUseCaseDep):
    """List every patient."""
    patients = await use_case.execute()
    return [PatientResponse.from_entity(p) for p in patients]


@patients_router.get("/search", response_model=list[PatientResponse])
async def search_patients_by_phone(use_case: SearchPatientsUseCaseDep, phone_number: str):
    """Find patients by phone number."""
    patients = await use_case.by_phone(phone_number)
    if not patients:
        raise HTTPException(status_code=404, detail="No patients found with this mobile number")
    return [PatientResponse.from_entity(p) for p in patients]


@patients_router.get("/slot/{slot_id}", response_model=PatientResponse)
async def get_patient_by_slot(slot_id: int, use_case: SearchPatientsUseCaseDep):
    """Get the patient holding a slot."""
    patients = await use_case.by_slot(slot_id)
    if not patients:
        raise HTTPException(status_code=404, detail=f"No patient found for slot {slot_id}")
    return PatientResponse.from_entity(patients[0])


@patients_router.get("/doctor/{doctor_id}", response_model=list[PatientResponse])
async def get_patients_by_doctor(doctor_id: int, use_case: SearchPatientsUseCaseDep):
    """List a doctor's patients."""
    patients = await use_case.by_doctor(doctor_id)
    if not patients:
        raise HTTPException(status_code=404, detail="No patients found for this doctor")
    return [PatientResponse.from_entity(p) for p in patients]


@patients_router.get("/doctor/{doctor_id}/date/{appointment_date}", response_model=list[PatientResponse])
async def get_patients_by_doctor_and_date(
    doctor_id: int,
    appointment_date: str,
    use_case: SearchPatientsUseCaseDep,
):
    """List a doctor's patients on one day."""
    parsed = _parse_date(appointment_date, "date")
    patients = await use_case.by_doctor_and_date(doctor_id, parsed)
    if not patients:
        raise HTTPException(status_code=404, detail="No patients found for this doctor on this date")
    return [PatientResponse.from_entity(p) for p in patients]


@patients_router.get("/doctor/{doctor_id}/range", response_model=list[PatientResponse])
async def get_patients_by_doctor_and_date_range(
    doctor_id: int,
    start_date: date,
    end_date: date,
    use_case: SearchPatientsUseCaseDep,
):
    """List a doctor's patients between two dates, both included."""
    patients = await use_case.by_doctor_and_date_range(doctor_id, start_date, end_date)
    return [PatientResponse.from_entity(p) for p in patients]


@patients_router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: int, use_case: GetPatientUseCaseDep):
    """Get a patient by ID."""
    patient = await use_case.execute(patient_id)
    return PatientResponse.from_entity(patient)


@patients_router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: int,
    request: PatientUpdateRequest,
    use_case: UpdatePatientUseCaseDep,
):
    """Update a patient's personal and appointment fields."""
    patient = await use_case.execute(
        UpdatePatientRequest(patient_id=patient_id, changes=request.model_dump(exclude_unset=True))
    )
    return PatientResponse.from_entity(patient)


@patients_router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient(patient_id: int, use_case: DeletePatientUseCaseDep):
    """Delete a patient. The slot stays booked."""
    await use_case.execute(patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


router = APIRouter()
router.include_router(slots_router)
router.include_router(patients_router)

__all__ = ["router", "slots_router", "patients_router"]
