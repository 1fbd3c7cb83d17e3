from datetime import date
from typing import List, Optional, Protocol
from gymbooking.models.mod_appointment import Appointment
from gymbooking.models.mod_catalog import Service, Trainer
from gymbooking.models.mod_schedule import ScheduleOwner, WorkingHours

class ScheduleReader(Protocol):
    """
    Read interface the scheduling core runs against.

    Implementations own all I/O; the core only ever sees the returned models.
    """

    def get_working_hours(self, owner: ScheduleOwner) -> List[WorkingHours]:
        ...

    def get_appointments(self, trainer_id: str, start_date: date, end_date: date) -> List[Appointment]:
        """Appointments of the trainer starting on any day in [start_date, end_date], any status"""
        ...

    def get_service_by_id(self, service_id: str) -> Optional[Service]:
        ...

    def get_trainers_qualified_for(self, service_id: str) -> List[Trainer]:
        ...
