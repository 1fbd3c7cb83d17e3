from pydantic import BaseModel, validator
from typing import List, Optional
from datetime import time
from gymbooking.models.mod_schedule import DayOfWeek, OwnerKind

class WorkingHoursEntry(BaseModel):
    day_of_week: int
    start_time: time
    end_time: time

    @validator('day_of_week')
    def validate_day_of_week(cls, v):
        if not (0 <= v <= 6):
            raise ValueError('day_of_week must be between 0 (Sunday) and 6 (Saturday)')
        return v

    @validator('end_time')
    def end_time_must_be_after_start_time(cls, v, values):
        if 'start_time' in values and v <= values['start_time']:
            raise ValueError('end_time must be after start_time')
        return v

class WorkingHoursUpdate(BaseModel):
    entries: List[WorkingHoursEntry]

class WorkingHoursResponse(BaseModel):
    id: Optional[str]
    owner_kind: OwnerKind
    owner_id: str
    day_of_week: DayOfWeek
    day_name: str
    start_time: time
    end_time: time
