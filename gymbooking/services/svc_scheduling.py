from sqlmodel import Session
from datetime import date, datetime, time
from typing import List, Optional
from zoneinfo import ZoneInfo
from gymbooking.models.mod_catalog import Trainer
from gymbooking.scheduling.availability import AvailabilityEvaluator
from gymbooking.scheduling.ports import ScheduleReader
from gymbooking.scheduling.slots import SlotGenerator
from gymbooking.scheduling.trainer_finder import TrainerFinder
from gymbooking.services.svc_schedule_reader import SqlScheduleReader
from gymbooking.configuration.config import Config
from gymbooking.configuration.monitor import log_event, log_exception, log_metric, start_span

class SchedulingService:
    @staticmethod
    def build_reader(session: Session) -> SqlScheduleReader:
        return SqlScheduleReader(session)

    @staticmethod
    def now_local() -> datetime:
        """Current wall-clock time at the center, without tzinfo"""
        return datetime.now(ZoneInfo(Config.CENTER_TIMEZONE)).replace(tzinfo=None)

    @staticmethod
    def to_local(value: datetime) -> datetime:
        """Convert an aware datetime to naive center wall-clock time; naive values are kept as is"""
        if value.tzinfo is None:
            return value
        return value.astimezone(ZoneInfo(Config.CENTER_TIMEZONE)).replace(tzinfo=None)

    @staticmethod
    def is_available(
        reader: ScheduleReader,
        trainer_id: str,
        date_time: datetime,
        duration_minutes: int,
        exclude_appointment_id: Optional[str] = None
    ) -> bool:
        try:
            date_time = SchedulingService.to_local(date_time)
            with start_span("is_available", attributes={"trainer_id": trainer_id, "date_time": date_time.isoformat()}):
                available = AvailabilityEvaluator(reader).is_available(
                    trainer_id, date_time, duration_minutes, exclude_appointment_id
                )
                log_event("Trainer availability evaluated", {
                    "trainer_id": trainer_id,
                    "date_time": date_time.isoformat(),
                    "duration_minutes": duration_minutes,
                    "available": available
                })
                return available
        except Exception as e:
            log_exception(e, {"operation": "is_available", "trainer_id": trainer_id})
            raise

    @staticmethod
    def available_slots(
        reader: ScheduleReader,
        trainer_id: str,
        day: date,
        duration_minutes: int,
        as_of: Optional[datetime] = None
    ) -> List[time]:
        try:
            as_of = SchedulingService.to_local(as_of) if as_of else SchedulingService.now_local()
            with start_span("available_slots", attributes={"trainer_id": trainer_id, "date": day.isoformat()}):
                generator = SlotGenerator(
                    AvailabilityEvaluator(reader),
                    granularity_minutes=Config.SLOT_GRANULARITY_MINUTES,
                    lead_minutes=Config.SLOT_LEAD_MINUTES
                )
                slots = generator.available_slots(trainer_id, day, duration_minutes, as_of)
                log_metric("available_slots", len(slots), {
                    "trainer_id": trainer_id,
                    "date": day.isoformat(),
                    "duration_minutes": duration_minutes
                })
                return slots
        except Exception as e:
            log_exception(e, {"operation": "available_slots", "trainer_id": trainer_id, "date": day.isoformat()})
            raise

    @staticmethod
    def available_trainers(reader: ScheduleReader, date_time: datetime, service_id: str) -> List[Trainer]:
        try:
            date_time = SchedulingService.to_local(date_time)
            with start_span("available_trainers", attributes={"service_id": service_id, "date_time": date_time.isoformat()}):
                trainers = TrainerFinder(reader).available_trainers(date_time, service_id)
                log_metric("available_trainers", len(trainers), {
                    "service_id": service_id,
                    "date_time": date_time.isoformat()
                })
                return trainers
        except Exception as e:
            log_exception(e, {"operation": "available_trainers", "service_id": service_id})
            raise
