from sqlmodel import Session, select
from typing import List
import uuid
from gymbooking.models.mod_schedule import ScheduleOwner, WorkingHours
from gymbooking.models.mod_tables import WorkingHoursRecord
from gymbooking.schemas.sch_working_hours import WorkingHoursUpdate
from gymbooking.services.svc_records import working_hours_from_record, working_hours_to_record
from gymbooking.validators.val_input import InputValidator
from gymbooking.validators.val_working_hours import WorkingHoursValidator
from gymbooking.configuration.monitor import log_event, log_exception, start_span

class WorkingHoursService:
    @staticmethod
    def _owner_records(session: Session, owner: ScheduleOwner) -> List[WorkingHoursRecord]:
        return list(session.exec(
            select(WorkingHoursRecord)
            .where(WorkingHoursRecord.owner_kind == owner.kind.value)
            .where(WorkingHoursRecord.owner_id == owner.id)
        ).all())

    @staticmethod
    def get_working_hours(session: Session, owner: ScheduleOwner) -> List[WorkingHours]:
        """Get the weekly schedule of a trainer or center, ordered by day then start time"""
        try:
            with start_span("get_working_hours", attributes={"owner_kind": owner.kind.value, "owner_id": owner.id}):
                records = WorkingHoursService._owner_records(session, owner)
                result = [working_hours_from_record(record) for record in records]
                result.sort(key=lambda entry: (entry.day_of_week, entry.start_time))
                log_event("Working hours retrieved", {
                    "owner_kind": owner.kind.value,
                    "owner_id": owner.id,
                    "count": len(result)
                })
                return result
        except Exception as e:
            log_exception(e, {"operation": "get_working_hours", "owner_id": owner.id})
            raise

    @staticmethod
    def set_working_hours(session: Session, owner: ScheduleOwner, update: WorkingHoursUpdate) -> List[WorkingHours]:
        """Replace the whole weekly schedule of the owner"""
        try:
            with start_span("set_working_hours", attributes={"owner_kind": owner.kind.value, "owner_id": owner.id}):
                log_event("Set working hours started", {
                    "owner_kind": owner.kind.value,
                    "owner_id": owner.id,
                    "entries": len(update.entries)
                })

                WorkingHoursValidator.validate_weekly_schedule(update.entries)

                for record in WorkingHoursService._owner_records(session, owner):
                    session.delete(record)

                result = []
                for entry in sorted(update.entries, key=lambda e: e.day_of_week):
                    working_hours = WorkingHours(
                        id=str(uuid.uuid4()),
                        owner=owner,
                        day_of_week=entry.day_of_week,
                        start_time=entry.start_time,
                        end_time=entry.end_time
                    )
                    session.add(working_hours_to_record(working_hours))
                    result.append(working_hours)
                session.commit()

                log_event("Working hours set successfully", {
                    "owner_kind": owner.kind.value,
                    "owner_id": owner.id,
                    "days": [int(entry.day_of_week) for entry in result]
                })
                return result
        except Exception as e:
            session.rollback()
            log_exception(e, {"operation": "set_working_hours", "owner_id": owner.id})
            raise

    @staticmethod
    def delete_working_hours(session: Session, owner: ScheduleOwner, day_of_week: int) -> bool:
        """Remove the owner's window for one day; False when there was none"""
        try:
            with start_span("delete_working_hours", attributes={"owner_id": owner.id, "day_of_week": day_of_week}):
                InputValidator.validate_day_of_week(day_of_week)

                records = [
                    record for record in WorkingHoursService._owner_records(session, owner)
                    if record.day_of_week == day_of_week
                ]
                for record in records:
                    session.delete(record)
                session.commit()

                log_event("Working hours deleted", {
                    "owner_id": owner.id,
                    "day_of_week": day_of_week,
                    "deleted": len(records)
                })
                return bool(records)
        except Exception as e:
            log_exception(e, {"operation": "delete_working_hours", "owner_id": owner.id})
            raise
