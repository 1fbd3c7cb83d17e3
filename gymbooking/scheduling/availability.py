from datetime import date, datetime, timedelta
from typing import List, Optional
from gymbooking.models.mod_appointment import Appointment
from gymbooking.models.mod_schedule import DayOfWeek, ScheduleOwner, WorkingHours
from gymbooking.scheduling.conflicts import ConflictDetector
from gymbooking.scheduling.ports import ScheduleReader
from gymbooking.scheduling.working_hours import WorkingHoursIndex

class AvailabilityEvaluator:
    """
    Answers whether a trainer can take an appointment of a given duration at a
    given wall-clock datetime: the trainer must work that day, the whole window
    must fit the working hours, and no non-cancelled booking may overlap it.
    """

    def __init__(self, reader: ScheduleReader):
        self._reader = reader

    def working_hours_for(self, trainer_id: str, day: date) -> Optional[WorkingHours]:
        index = WorkingHoursIndex.for_owner(self._reader, ScheduleOwner.trainer(trainer_id))
        return index.for_trainer(trainer_id, DayOfWeek.of(day))

    def appointments_for(self, trainer_id: str, day: date) -> List[Appointment]:
        # The previous day is included so a booking running past midnight still counts
        return self._reader.get_appointments(trainer_id, day - timedelta(days=1), day)

    @staticmethod
    def fits_working_hours(working_hours: WorkingHours, date_time: datetime, duration_minutes: int) -> bool:
        request_end = date_time + timedelta(minutes=duration_minutes)
        # Working hours never run past midnight
        if request_end.date() != date_time.date():
            return False
        return working_hours.contains(date_time.time(), request_end.time())

    def is_available(
        self,
        trainer_id: str,
        date_time: datetime,
        duration_minutes: int,
        exclude_appointment_id: Optional[str] = None
    ) -> bool:
        working_hours = self.working_hours_for(trainer_id, date_time.date())
        if working_hours is None:
            return False

        if not self.fits_working_hours(working_hours, date_time, duration_minutes):
            return False

        return not ConflictDetector.has_conflict(
            trainer_id,
            date_time,
            duration_minutes,
            self.appointments_for(trainer_id, date_time.date()),
            exclude_appointment_id
        )
