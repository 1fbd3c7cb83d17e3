from pydantic import BaseModel
from typing import Optional
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum

class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Appointment(BaseModel):
    id: Optional[str] = None
    member_id: str
    trainer_id: str
    service_id: str
    appointment_datetime: datetime
    duration_minutes: int
    price: Decimal
    status: AppointmentStatus = AppointmentStatus.PENDING
    notes: Optional[str] = None
    created_date: datetime

    class Config:
        from_attributes = True

    @property
    def end_datetime(self) -> datetime:
        return self.appointment_datetime + timedelta(minutes=self.duration_minutes)

    @property
    def is_cancelled(self) -> bool:
        return self.status == AppointmentStatus.CANCELLED
