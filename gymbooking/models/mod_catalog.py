from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum

class ServiceType(str, Enum):
    FITNESS = "fitness"
    YOGA = "yoga"
    PILATES = "pilates"

class Service(BaseModel):
    id: str
    name: str
    type: ServiceType
    description: str
    price: Decimal
    duration_minutes: int
    center_id: str

    class Config:
        from_attributes = True

class Trainer(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    center_id: str
    # Services this trainer is qualified to perform
    expertise: List[str] = []

    class Config:
        from_attributes = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_qualified_for(self, service_id: str) -> bool:
        return service_id in self.expertise

class FitnessCenter(BaseModel):
    id: str
    name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    created_date: datetime

    class Config:
        from_attributes = True
