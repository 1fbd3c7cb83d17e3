from datetime import date
from typing import List, Optional
from sqlmodel import Session, select
from gymbooking.models.mod_appointment import Appointment
from gymbooking.models.mod_catalog import Service, Trainer
from gymbooking.models.mod_schedule import ScheduleOwner, WorkingHours
from gymbooking.models.mod_tables import (
    AppointmentRecord,
    ServiceRecord,
    TrainerRecord,
    WorkingHoursRecord
)
from gymbooking.services.svc_records import (
    appointment_from_record,
    service_from_record,
    trainer_from_record,
    working_hours_from_record
)
from gymbooking.configuration.monitor import log_event, log_exception, start_span

class SqlScheduleReader:
    """ScheduleReader backed by the booking database."""

    def __init__(self, session: Session):
        self.session = session

    def get_working_hours(self, owner: ScheduleOwner) -> List[WorkingHours]:
        try:
            with start_span("get_working_hours", attributes={"owner_kind": owner.kind.value, "owner_id": owner.id}):
                records = self.session.exec(
                    select(WorkingHoursRecord)
                    .where(WorkingHoursRecord.owner_kind == owner.kind.value)
                    .where(WorkingHoursRecord.owner_id == owner.id)
                ).all()
                return [working_hours_from_record(record) for record in records]
        except Exception as e:
            log_exception(e, {"operation": "get_working_hours", "owner_id": owner.id})
            raise

    def get_appointments(self, trainer_id: str, start_date: date, end_date: date) -> List[Appointment]:
        """Appointments of any status starting on a day in [start_date, end_date]"""
        try:
            with start_span("get_appointments", attributes={"trainer_id": trainer_id}):
                records = self.session.exec(
                    select(AppointmentRecord)
                    .where(AppointmentRecord.trainer_id == trainer_id)
                    .where(AppointmentRecord.appointment_date >= start_date)
                    .where(AppointmentRecord.appointment_date <= end_date)
                ).all()
                return [appointment_from_record(record) for record in records]
        except Exception as e:
            log_exception(e, {"operation": "get_appointments", "trainer_id": trainer_id})
            raise

    def get_service_by_id(self, service_id: str) -> Optional[Service]:
        try:
            with start_span("get_service_by_id", attributes={"service_id": service_id}):
                record = self.session.get(ServiceRecord, service_id)
                if record:
                    return service_from_record(record)

                log_event("Service not found", {"service_id": service_id})
                return None
        except Exception as e:
            log_exception(e, {"operation": "get_service_by_id", "service_id": service_id})
            raise

    def get_trainers_qualified_for(self, service_id: str) -> List[Trainer]:
        try:
            with start_span("get_trainers_qualified_for", attributes={"service_id": service_id}):
                # Expertise is a JSON list, matched here rather than in SQL
                records = self.session.exec(select(TrainerRecord)).all()
                trainers = [trainer_from_record(record) for record in records]
                return [trainer for trainer in trainers if trainer.is_qualified_for(service_id)]
        except Exception as e:
            log_exception(e, {"operation": "get_trainers_qualified_for", "service_id": service_id})
            raise
