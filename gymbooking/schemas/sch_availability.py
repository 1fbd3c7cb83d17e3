from pydantic import BaseModel
from typing import Optional

class AvailabilityResponse(BaseModel):
    trainer_id: str
    available: bool

class TimeSlotResponse(BaseModel):
    time: str       # HH:MM
    date_time: str  # YYYY-MM-DDTHH:MM

class AvailableTrainerResponse(BaseModel):
    id: str
    full_name: str
    email: Optional[str]
    phone: Optional[str]
    bio: Optional[str]
    upcoming_appointments: int
