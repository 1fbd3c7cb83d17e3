from fastapi import APIRouter, HTTPException, Depends
from sqlmodel import Session
from gymbooking.schemas.sch_appointment import AppointmentCreate, AppointmentResponse
from gymbooking.scheduling.ports import ScheduleReader
from gymbooking.services.svc_appointment import AppointmentService
from gymbooking.configuration.database import get_session
from gymbooking.dependencies.dep_scheduling import get_schedule_reader
from typing import List

router = APIRouter(
    prefix="/appointments",
    tags=["Appointments"],
    responses={404: {"description": "Not found"}},
)

@router.post('/', response_model=AppointmentResponse)
def create_appointment(
    appointment: AppointmentCreate,
    session: Session = Depends(get_session),
    reader: ScheduleReader = Depends(get_schedule_reader)
):
    """
    Book a service with a trainer.

    - Duration and price are copied from the service
    - The trainer must be qualified for the service and available for its whole duration
    - Member bookings start pending, admin bookings start confirmed
    - Returns 409 when the trainer is not available
    """
    return AppointmentService.create_appointment(session, reader, appointment)

@router.get('/{appointment_id}', response_model=AppointmentResponse)
def get_appointment(
    appointment_id: str,
    session: Session = Depends(get_session)
):
    appointment = AppointmentService.get_appointment(session, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail='Appointment not found')
    return appointment

@router.get('/member/{member_id}', response_model=List[AppointmentResponse])
def get_member_appointments(
    member_id: str,
    session: Session = Depends(get_session)
):
    """
    Get all appointments of a member, newest first.
    """
    return AppointmentService.get_member_appointments(session, member_id)

@router.get('/trainer/{trainer_id}', response_model=List[AppointmentResponse])
def get_trainer_appointments(
    trainer_id: str,
    session: Session = Depends(get_session)
):
    """
    Get all appointments of a trainer, newest first.
    """
    return AppointmentService.get_trainer_appointments(session, trainer_id)

@router.post('/{appointment_id}/approve', response_model=AppointmentResponse)
def approve_appointment(
    appointment_id: str,
    session: Session = Depends(get_session)
):
    """
    Confirm a pending appointment.
    """
    appointment = AppointmentService.approve_appointment(session, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail='Appointment not found')
    return appointment

@router.post('/{appointment_id}/complete', response_model=AppointmentResponse)
def complete_appointment(
    appointment_id: str,
    session: Session = Depends(get_session)
):
    """
    Mark a confirmed appointment as completed.
    """
    appointment = AppointmentService.complete_appointment(session, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail='Appointment not found')
    return appointment

@router.post('/{appointment_id}/cancel', response_model=AppointmentResponse)
def cancel_appointment(
    appointment_id: str,
    session: Session = Depends(get_session)
):
    """
    Cancel an appointment.

    - Changes the status to 'cancelled', the record is kept
    - Completed appointments cannot be cancelled
    - The freed time is immediately available to new bookings
    """
    appointment = AppointmentService.cancel_appointment(session, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail='Appointment not found')
    return appointment
