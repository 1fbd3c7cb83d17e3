from datetime import date, datetime, time, timedelta
from typing import List
from gymbooking.scheduling.availability import AvailabilityEvaluator
from gymbooking.scheduling.conflicts import ConflictDetector

DEFAULT_GRANULARITY_MINUTES = 30

class SlotGenerator:
    """
    Enumerates free start times for a trainer on one date.

    Candidates sit on a fixed grid anchored at the start of the working hours
    and spaced ``granularity_minutes`` apart, whatever the requested duration.
    ``as_of`` is the caller's notion of now: past dates yield nothing, and on
    the as_of date a slot must start strictly after ``as_of + lead_minutes``.
    """

    def __init__(
        self,
        evaluator: AvailabilityEvaluator,
        granularity_minutes: int = DEFAULT_GRANULARITY_MINUTES,
        lead_minutes: int = 0
    ):
        if granularity_minutes <= 0:
            raise ValueError("granularity_minutes must be positive")
        if lead_minutes < 0:
            raise ValueError("lead_minutes cannot be negative")
        self._evaluator = evaluator
        self._step = timedelta(minutes=granularity_minutes)
        self._lead = timedelta(minutes=lead_minutes)

    def available_slots(self, trainer_id: str, day: date, duration_minutes: int, as_of: datetime) -> List[time]:
        if day < as_of.date():
            return []

        working_hours = self._evaluator.working_hours_for(trainer_id, day)
        if working_hours is None:
            return []

        appointments = [
            appointment for appointment in self._evaluator.appointments_for(trainer_id, day)
            if not appointment.is_cancelled
        ]
        cutoff = as_of + self._lead if day == as_of.date() else None

        duration = timedelta(minutes=duration_minutes)
        current = datetime.combine(day, working_hours.start_time)
        window_end = datetime.combine(day, working_hours.end_time)

        slots = []
        while current + duration <= window_end:
            if cutoff is None or current > cutoff:
                if not ConflictDetector.has_conflict(trainer_id, current, duration_minutes, appointments):
                    slots.append(current.time())
            current += self._step
        return slots
