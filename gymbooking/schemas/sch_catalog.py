from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from gymbooking.models.mod_catalog import ServiceType

class TrainerResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    full_name: str
    email: Optional[str]
    phone: Optional[str]
    bio: Optional[str]
    center_id: str
    expertise: List[str]

class ServiceResponse(BaseModel):
    id: str
    name: str
    type: ServiceType
    description: str
    price: Decimal
    duration_minutes: int
    center_id: str

    class Config:
        from_attributes = True

class FitnessCenterResponse(BaseModel):
    id: str
    name: str
    address: str
    phone: Optional[str]
    email: Optional[str]
    created_date: datetime

    class Config:
        from_attributes = True
