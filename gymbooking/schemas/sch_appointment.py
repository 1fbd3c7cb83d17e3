from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum
from gymbooking.models.mod_appointment import AppointmentStatus

class RequesterRole(str, Enum):
    MEMBER = "member"
    ADMIN = "admin"

class AppointmentCreate(BaseModel):
    member_id: str
    trainer_id: str
    service_id: str
    appointment_datetime: datetime = Field(
        description="Wall-clock start time at the center in ISO 8601 format (e.g. 2025-03-11T10:00:00)"
    )
    notes: Optional[str] = Field(default=None, max_length=500)
    requested_by: RequesterRole = Field(
        default=RequesterRole.MEMBER,
        description="Admin-created appointments start confirmed, member-created ones pending"
    )

class AppointmentResponse(BaseModel):
    id: str
    member_id: str
    trainer_id: str
    service_id: str
    appointment_datetime: datetime
    duration_minutes: int
    price: Decimal
    status: AppointmentStatus
    notes: Optional[str]
    created_date: datetime

    class Config:
        from_attributes = True
