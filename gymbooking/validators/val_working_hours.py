from collections import Counter
from typing import List
from gymbooking.models.mod_schedule import DayOfWeek
from gymbooking.schemas.sch_working_hours import WorkingHoursEntry
from gymbooking.validators.val_input import InvalidInputError

class WorkingHoursValidator:
    @staticmethod
    def validate_time_window(entry: WorkingHoursEntry):
        """Validate that the window starts before it ends"""
        if entry.start_time >= entry.end_time:
            raise InvalidInputError(
                "start_time must be before end_time"
            )

    @staticmethod
    def validate_one_entry_per_day(entries: List[WorkingHoursEntry]):
        """Validate that a weekly schedule holds at most one window per day"""
        counts = Counter(entry.day_of_week for entry in entries)
        duplicated = sorted(day for day, count in counts.items() if count > 1)
        if duplicated:
            names = ", ".join(DayOfWeek(day).name.capitalize() for day in duplicated)
            raise InvalidInputError(
                f"Only one working-hours entry per day is allowed (duplicated: {names})"
            )

    @staticmethod
    def validate_weekly_schedule(entries: List[WorkingHoursEntry]):
        """Validate all rules for replacing a weekly schedule"""
        for entry in entries:
            WorkingHoursValidator.validate_time_window(entry)
        WorkingHoursValidator.validate_one_entry_per_day(entries)
