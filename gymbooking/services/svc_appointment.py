from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, func
from datetime import date, datetime, timedelta
from typing import List, Optional
import uuid
from gymbooking.models.mod_appointment import Appointment, AppointmentStatus
from gymbooking.models.mod_tables import AppointmentRecord, BookingLedgerRecord
from gymbooking.schemas.sch_appointment import AppointmentCreate, RequesterRole
from gymbooking.scheduling.conflicts import ConflictDetector
from gymbooking.scheduling.ports import ScheduleReader
from gymbooking.services.svc_records import appointment_from_record, appointment_to_record
from gymbooking.services.svc_scheduling import SchedulingService
from gymbooking.validators.val_appointment import (
    AppointmentValidator,
    ServiceNotFoundError,
    TrainerNotAvailableError
)
from gymbooking.configuration.config import Config
from gymbooking.configuration.monitor import log_event, log_exception, start_span

class AppointmentService:
    @staticmethod
    def create_appointment(
        session: Session,
        reader: ScheduleReader,
        appointment: AppointmentCreate
    ) -> Appointment:
        try:
            with start_span("create_appointment", attributes={
                "member_id": appointment.member_id,
                "trainer_id": appointment.trainer_id,
                "service_id": appointment.service_id
            }):
                appointment_datetime = SchedulingService.to_local(appointment.appointment_datetime)
                log_event("Create appointment started", {
                    "member_id": appointment.member_id,
                    "trainer_id": appointment.trainer_id,
                    "service_id": appointment.service_id,
                    "appointment_datetime": appointment_datetime.isoformat()
                })

                service = reader.get_service_by_id(appointment.service_id)
                if service is None:
                    raise ServiceNotFoundError()

                AppointmentValidator.validate_trainer_qualified(
                    appointment.trainer_id,
                    reader.get_trainers_qualified_for(service.id)
                )

                # Optimistic pre-check, repeated under the ledger guard on commit
                if not SchedulingService.is_available(
                    reader, appointment.trainer_id, appointment_datetime, service.duration_minutes
                ):
                    raise TrainerNotAvailableError()

                status = (
                    AppointmentStatus.CONFIRMED
                    if appointment.requested_by == RequesterRole.ADMIN
                    else AppointmentStatus.PENDING
                )
                # Duration and price are copied from the service at booking time
                new_appointment = Appointment(
                    id=str(uuid.uuid4()),
                    member_id=appointment.member_id,
                    trainer_id=appointment.trainer_id,
                    service_id=service.id,
                    appointment_datetime=appointment_datetime,
                    duration_minutes=service.duration_minutes,
                    price=service.price,
                    status=status,
                    notes=appointment.notes,
                    created_date=SchedulingService.now_local()
                )

                AppointmentService._commit(session, reader, new_appointment)

                log_event("Appointment created successfully", {
                    "appointment_id": new_appointment.id,
                    "trainer_id": new_appointment.trainer_id,
                    "status": new_appointment.status.value
                })
                return new_appointment
        except Exception as e:
            log_exception(e, {
                "operation": "create_appointment",
                "member_id": appointment.member_id,
                "trainer_id": appointment.trainer_id
            })
            raise

    @staticmethod
    def _ledger_version(session: Session, trainer_id: str, day: date) -> Optional[int]:
        return session.exec(
            select(BookingLedgerRecord.version)
            .where(BookingLedgerRecord.trainer_id == trainer_id)
            .where(BookingLedgerRecord.day == day)
        ).first()

    @staticmethod
    def _claim_ledger(session: Session, trainer_id: str, day: date, version: Optional[int]) -> bool:
        """
        Bump the trainer/day ledger from the version read before the conflict check.
        False means another booking on the same trainer and day got there first.
        """
        if version is None:
            session.add(BookingLedgerRecord(trainer_id=trainer_id, day=day, version=1))
            try:
                session.flush()
            except IntegrityError:
                return False
            return True

        result = session.exec(
            update(BookingLedgerRecord)
            .where(BookingLedgerRecord.trainer_id == trainer_id)
            .where(BookingLedgerRecord.day == day)
            .where(BookingLedgerRecord.version == version)
            .values(version=version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    @staticmethod
    def _commit(session: Session, reader: ScheduleReader, appointment: Appointment):
        """
        Insert the appointment in the same transaction that bumps its trainer/day
        ledger. The bump only succeeds if nobody booked the same trainer and day
        since the ledger was read, so the conflict check run just before it is
        still valid when the appointment lands.
        """
        day = appointment.appointment_datetime.date()
        for attempt in range(1, Config.BOOKING_COMMIT_ATTEMPTS + 1):
            version = AppointmentService._ledger_version(session, appointment.trainer_id, day)
            existing = reader.get_appointments(appointment.trainer_id, day - timedelta(days=1), day)
            if ConflictDetector.has_conflict(
                appointment.trainer_id,
                appointment.appointment_datetime,
                appointment.duration_minutes,
                existing
            ):
                session.rollback()
                raise TrainerNotAvailableError()

            if AppointmentService._claim_ledger(session, appointment.trainer_id, day, version):
                session.add(appointment_to_record(appointment))
                try:
                    session.commit()
                    return
                except IntegrityError:
                    pass

            session.rollback()
            log_event("Appointment commit raced, retrying", {
                "trainer_id": appointment.trainer_id,
                "date": day.isoformat(),
                "attempt": attempt
            })

        raise TrainerNotAvailableError(
            "The trainer's schedule changed while booking, please try again."
        )

    @staticmethod
    def get_appointment(session: Session, appointment_id: str) -> Optional[Appointment]:
        try:
            with start_span("get_appointment", attributes={"appointment_id": appointment_id}):
                log_event("Retrieving appointment", {"appointment_id": appointment_id})

                record = session.get(AppointmentRecord, appointment_id)
                if record:
                    return appointment_from_record(record)

                log_event("Appointment not found", {"appointment_id": appointment_id})
                return None
        except Exception as e:
            log_exception(e, {"operation": "get_appointment", "appointment_id": appointment_id})
            raise

    @staticmethod
    def get_member_appointments(session: Session, member_id: str) -> List[Appointment]:
        """Get all appointments of a member, newest first"""
        try:
            with start_span("get_member_appointments", attributes={"member_id": member_id}):
                records = session.exec(
                    select(AppointmentRecord)
                    .where(AppointmentRecord.member_id == member_id)
                    .order_by(AppointmentRecord.appointment_datetime.desc())
                ).all()
                appointments = [appointment_from_record(record) for record in records]
                log_event("Member appointments retrieved", {"member_id": member_id, "count": len(appointments)})
                return appointments
        except Exception as e:
            log_exception(e, {"operation": "get_member_appointments", "member_id": member_id})
            raise

    @staticmethod
    def get_trainer_appointments(session: Session, trainer_id: str) -> List[Appointment]:
        """Get all appointments of a trainer, newest first"""
        try:
            with start_span("get_trainer_appointments", attributes={"trainer_id": trainer_id}):
                records = session.exec(
                    select(AppointmentRecord)
                    .where(AppointmentRecord.trainer_id == trainer_id)
                    .order_by(AppointmentRecord.appointment_datetime.desc())
                ).all()
                appointments = [appointment_from_record(record) for record in records]
                log_event("Trainer appointments retrieved", {"trainer_id": trainer_id, "count": len(appointments)})
                return appointments
        except Exception as e:
            log_exception(e, {"operation": "get_trainer_appointments", "trainer_id": trainer_id})
            raise

    @staticmethod
    def count_upcoming_appointments(session: Session, trainer_id: str, as_of: datetime) -> int:
        try:
            with start_span("count_upcoming_appointments", attributes={"trainer_id": trainer_id}):
                count = session.exec(
                    select(func.count())
                    .select_from(AppointmentRecord)
                    .where(AppointmentRecord.trainer_id == trainer_id)
                    .where(AppointmentRecord.status != AppointmentStatus.CANCELLED.value)
                    .where(AppointmentRecord.appointment_datetime >= as_of)
                ).one()
                return count
        except Exception as e:
            log_exception(e, {"operation": "count_upcoming_appointments", "trainer_id": trainer_id})
            raise

    @staticmethod
    def _change_status(session: Session, appointment_id: str, target: AppointmentStatus) -> Optional[Appointment]:
        try:
            with start_span("change_appointment_status", attributes={
                "appointment_id": appointment_id,
                "target_status": target.value
            }):
                record = session.get(AppointmentRecord, appointment_id)
                if record is None:
                    log_event("Appointment not found for status change", {"appointment_id": appointment_id})
                    return None

                previous = AppointmentStatus(record.status)
                AppointmentValidator.validate_status_transition(previous, target)

                record.status = target.value
                session.add(record)
                session.commit()
                session.refresh(record)

                log_event("Appointment status changed", {
                    "appointment_id": appointment_id,
                    "trainer_id": record.trainer_id,
                    "previous_status": previous.value,
                    "status": target.value
                })
                return appointment_from_record(record)
        except Exception as e:
            log_exception(e, {"operation": "change_appointment_status", "appointment_id": appointment_id})
            raise

    @staticmethod
    def approve_appointment(session: Session, appointment_id: str) -> Optional[Appointment]:
        return AppointmentService._change_status(session, appointment_id, AppointmentStatus.CONFIRMED)

    @staticmethod
    def complete_appointment(session: Session, appointment_id: str) -> Optional[Appointment]:
        return AppointmentService._change_status(session, appointment_id, AppointmentStatus.COMPLETED)

    @staticmethod
    def cancel_appointment(session: Session, appointment_id: str) -> Optional[Appointment]:
        """Cancel by status change; the interval is free for new bookings right away"""
        return AppointmentService._change_status(session, appointment_id, AppointmentStatus.CANCELLED)
