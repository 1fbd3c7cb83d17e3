from collections import defaultdict
from typing import Dict, Iterable, Optional, Tuple
from gymbooking.configuration.monitor import log_warning
from gymbooking.models.mod_schedule import DayOfWeek, ScheduleOwner, WorkingHours
from gymbooking.scheduling.ports import ScheduleReader

def _tie_break(entry: WorkingHours):
    # Earliest start wins, then earliest end, then id
    return (entry.start_time, entry.end_time, entry.id or "")

class WorkingHoursIndex:
    """
    Weekly working-hours lookup keyed by (owner, day of week).

    Owners are tagged trainer or center ids. A day holds at most one window;
    when storage returns several rows for the same owner and day, the one
    ordered first by (start_time, end_time, id) is kept and the anomaly is logged.
    """

    def __init__(self, entries: Iterable[WorkingHours]):
        grouped = defaultdict(list)
        for entry in entries:
            grouped[(entry.owner, DayOfWeek(entry.day_of_week))].append(entry)

        self._windows: Dict[Tuple[ScheduleOwner, DayOfWeek], WorkingHours] = {}
        for (owner, day), rows in grouped.items():
            rows.sort(key=_tie_break)
            if len(rows) > 1:
                log_warning("Duplicate working hours for day", {
                    "owner_kind": owner.kind.value,
                    "owner_id": owner.id,
                    "day_of_week": day.name,
                    "rows": len(rows),
                    "kept_id": rows[0].id
                })
            self._windows[(owner, day)] = rows[0]

    @classmethod
    def for_owner(cls, reader: ScheduleReader, owner: ScheduleOwner) -> "WorkingHoursIndex":
        return cls(reader.get_working_hours(owner))

    def lookup(self, owner: ScheduleOwner, day_of_week: int) -> Optional[WorkingHours]:
        """Working-hours window of the owner on that day, or None when the owner does not work it"""
        return self._windows.get((owner, DayOfWeek(day_of_week)))

    def for_trainer(self, trainer_id: str, day_of_week: int) -> Optional[WorkingHours]:
        return self.lookup(ScheduleOwner.trainer(trainer_id), day_of_week)

    def for_center(self, center_id: str, day_of_week: int) -> Optional[WorkingHours]:
        return self.lookup(ScheduleOwner.center(center_id), day_of_week)

    def __len__(self):
        return len(self._windows)
