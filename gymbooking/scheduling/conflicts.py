from datetime import datetime, timedelta
from typing import Iterable, Optional
from gymbooking.models.mod_appointment import Appointment

class ConflictDetector:
    @staticmethod
    def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
        """Half-open interval overlap; touching endpoints do not overlap"""
        return start_a < end_b and end_a > start_b

    @staticmethod
    def find_conflict(
        trainer_id: str,
        candidate_start: datetime,
        candidate_duration_minutes: int,
        existing_appointments: Iterable[Appointment],
        exclude_appointment_id: Optional[str] = None
    ) -> Optional[Appointment]:
        """First non-cancelled appointment of the trainer overlapping the candidate window"""
        candidate_end = candidate_start + timedelta(minutes=candidate_duration_minutes)
        for existing in existing_appointments:
            if existing.trainer_id != trainer_id or existing.is_cancelled:
                continue
            if exclude_appointment_id is not None and existing.id == exclude_appointment_id:
                continue
            if ConflictDetector.overlaps(
                existing.appointment_datetime, existing.end_datetime,
                candidate_start, candidate_end
            ):
                return existing
        return None

    @staticmethod
    def has_conflict(
        trainer_id: str,
        candidate_start: datetime,
        candidate_duration_minutes: int,
        existing_appointments: Iterable[Appointment],
        exclude_appointment_id: Optional[str] = None
    ) -> bool:
        return ConflictDetector.find_conflict(
            trainer_id,
            candidate_start,
            candidate_duration_minutes,
            existing_appointments,
            exclude_appointment_id
        ) is not None
