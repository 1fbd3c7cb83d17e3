from pydantic import BaseModel
from typing import Optional
from datetime import time
from enum import Enum, IntEnum

class DayOfWeek(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value) -> "DayOfWeek":
        """Day of week of a date or datetime, counted from Sunday"""
        # date.weekday() counts from Monday
        return cls((value.weekday() + 1) % 7)

class OwnerKind(str, Enum):
    TRAINER = "trainer"
    CENTER = "center"

class ScheduleOwner(BaseModel):
    kind: OwnerKind
    id: str

    class Config:
        frozen = True

    @classmethod
    def trainer(cls, trainer_id: str) -> "ScheduleOwner":
        return cls(kind=OwnerKind.TRAINER, id=trainer_id)

    @classmethod
    def center(cls, center_id: str) -> "ScheduleOwner":
        return cls(kind=OwnerKind.CENTER, id=center_id)

class WorkingHours(BaseModel):
    id: Optional[str] = None
    owner: ScheduleOwner
    day_of_week: DayOfWeek
    start_time: time
    end_time: time

    class Config:
        from_attributes = True

    def contains(self, start: time, end: time) -> bool:
        """True when [start, end) lies inside this window"""
        return self.start_time <= start and end <= self.end_time

