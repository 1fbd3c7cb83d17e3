from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from gymbooking.schemas.sch_availability import (
    AvailabilityResponse,
    AvailableTrainerResponse,
    TimeSlotResponse
)
from gymbooking.scheduling.ports import ScheduleReader
from gymbooking.services.svc_appointment import AppointmentService
from gymbooking.services.svc_scheduling import SchedulingService
from gymbooking.validators.val_input import InputValidator
from gymbooking.configuration.database import get_session
from gymbooking.dependencies.dep_scheduling import get_schedule_reader
from typing import List, Optional
from datetime import date, datetime

router = APIRouter(
    prefix="/availability",
    tags=["Availability"],
    responses={404: {"description": "Not found"}},
)

@router.get("/trainers", response_model=List[AvailableTrainerResponse])
def get_available_trainers(
    date_time: datetime = Query(..., description="Requested appointment start"),
    service_id: str = Query(..., description="Service to be booked"),
    reader: ScheduleReader = Depends(get_schedule_reader),
    session: Session = Depends(get_session)
):
    """
    List the trainers who can take the service at the requested time.

    - Only trainers with expertise for the service are considered
    - The whole service duration must fit the trainer's working hours
    - Trainers with an overlapping non-cancelled appointment are left out
    - Ordered by last name, then first name
    - An unknown service or a fully booked slot gives an empty list
    """
    trainers = SchedulingService.available_trainers(reader, date_time, service_id)
    as_of = SchedulingService.now_local()
    return [
        AvailableTrainerResponse(
            id=trainer.id,
            full_name=trainer.full_name,
            email=trainer.email,
            phone=trainer.phone,
            bio=trainer.bio,
            upcoming_appointments=AppointmentService.count_upcoming_appointments(session, trainer.id, as_of)
        )
        for trainer in trainers
    ]

@router.get("/trainers/{trainer_id}", response_model=AvailabilityResponse)
def get_trainer_availability(
    trainer_id: str,
    date_time: datetime = Query(..., description="Requested appointment start"),
    duration_minutes: int = Query(..., description="Requested duration in minutes"),
    exclude_appointment_id: Optional[str] = Query(None, description="Appointment to ignore, e.g. the one being edited"),
    reader: ScheduleReader = Depends(get_schedule_reader)
):
    """
    Check whether a trainer can take an appointment of the given duration.
    """
    InputValidator.validate_duration(duration_minutes)
    available = SchedulingService.is_available(
        reader, trainer_id, date_time, duration_minutes, exclude_appointment_id
    )
    return AvailabilityResponse(trainer_id=trainer_id, available=available)

@router.get("/trainers/{trainer_id}/slots", response_model=List[TimeSlotResponse])
def get_available_time_slots(
    trainer_id: str,
    day: date = Query(..., alias="date", description="Day to search, YYYY-MM-DD"),
    duration_minutes: int = Query(..., description="Requested duration in minutes"),
    reader: ScheduleReader = Depends(get_schedule_reader)
):
    """
    List the free start times of a trainer on a day.

    - Start times are spaced on a fixed grid from the start of working hours
    - Past days have no slots; today's slots must start after the current time
    - Returns an empty list when the trainer does not work that day
    """
    InputValidator.validate_duration(duration_minutes)
    slots = SchedulingService.available_slots(reader, trainer_id, day, duration_minutes)
    return [
        TimeSlotResponse(
            time=slot.strftime("%H:%M"),
            date_time=datetime.combine(day, slot).strftime("%Y-%m-%dT%H:%M")
        )
        for slot in slots
    ]
