"""Conversion between database records and domain models."""
from gymbooking.models.mod_appointment import Appointment
from gymbooking.models.mod_catalog import FitnessCenter, Service, Trainer
from gymbooking.models.mod_schedule import ScheduleOwner, WorkingHours
from gymbooking.models.mod_tables import (
    AppointmentRecord,
    FitnessCenterRecord,
    ServiceRecord,
    TrainerRecord,
    WorkingHoursRecord
)

def working_hours_to_record(entry: WorkingHours) -> WorkingHoursRecord:
    return WorkingHoursRecord(
        id=entry.id,
        owner_kind=entry.owner.kind.value,
        owner_id=entry.owner.id,
        day_of_week=int(entry.day_of_week),
        start_time=entry.start_time,
        end_time=entry.end_time
    )

def working_hours_from_record(record: WorkingHoursRecord) -> WorkingHours:
    return WorkingHours(
        id=record.id,
        owner=ScheduleOwner(kind=record.owner_kind, id=record.owner_id),
        day_of_week=record.day_of_week,
        start_time=record.start_time,
        end_time=record.end_time
    )

def appointment_to_record(appointment: Appointment) -> AppointmentRecord:
    return AppointmentRecord(
        id=appointment.id,
        member_id=appointment.member_id,
        trainer_id=appointment.trainer_id,
        service_id=appointment.service_id,
        appointment_datetime=appointment.appointment_datetime,
        appointment_date=appointment.appointment_datetime.date(),
        duration_minutes=appointment.duration_minutes,
        price=appointment.price,
        status=appointment.status.value,
        notes=appointment.notes,
        created_date=appointment.created_date
    )

def appointment_from_record(record: AppointmentRecord) -> Appointment:
    return Appointment(
        id=record.id,
        member_id=record.member_id,
        trainer_id=record.trainer_id,
        service_id=record.service_id,
        appointment_datetime=record.appointment_datetime,
        duration_minutes=record.duration_minutes,
        price=record.price,
        status=record.status,
        notes=record.notes,
        created_date=record.created_date
    )

def trainer_from_record(record: TrainerRecord) -> Trainer:
    return Trainer(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        email=record.email,
        phone=record.phone,
        bio=record.bio,
        center_id=record.center_id,
        expertise=list(record.expertise or [])
    )

def service_from_record(record: ServiceRecord) -> Service:
    return Service(
        id=record.id,
        name=record.name,
        type=record.type,
        description=record.description,
        price=record.price,
        duration_minutes=record.duration_minutes,
        center_id=record.center_id
    )

def center_from_record(record: FitnessCenterRecord) -> FitnessCenter:
    return FitnessCenter(
        id=record.id,
        name=record.name,
        address=record.address,
        phone=record.phone,
        email=record.email,
        created_date=record.created_date
    )
