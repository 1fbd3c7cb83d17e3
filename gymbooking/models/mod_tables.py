from typing import Optional, List
from datetime import date, time
from decimal import Decimal

from pydantic import NaiveDatetime
from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column

class FitnessCenterRecord(SQLModel, table=True):
    __tablename__ = "fitness_centers"

    id: str = Field(primary_key=True)
    name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    created_date: NaiveDatetime

class TrainerRecord(SQLModel, table=True):
    __tablename__ = "trainers"

    id: str = Field(primary_key=True)
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    center_id: str = Field(index=True)
    # Service ids the trainer is qualified for
    expertise: List[str] = Field(default_factory=list, sa_column=Column(JSON))

class ServiceRecord(SQLModel, table=True):
    __tablename__ = "services"

    id: str = Field(primary_key=True)
    name: str
    type: str
    description: str
    price: Decimal = Field(max_digits=10, decimal_places=2)
    duration_minutes: int
    center_id: str = Field(index=True)

class WorkingHoursRecord(SQLModel, table=True):
    __tablename__ = "working_hours"

    id: str = Field(primary_key=True)
    owner_kind: str = Field(index=True)  # "trainer" or "center"
    owner_id: str = Field(index=True)
    day_of_week: int  # 0 = Sunday
    start_time: time
    end_time: time

class AppointmentRecord(SQLModel, table=True):
    __tablename__ = "appointments"

    id: str = Field(primary_key=True)
    member_id: str = Field(index=True)
    trainer_id: str = Field(index=True)
    service_id: str
    # Center wall-clock time, stored without offset
    appointment_datetime: NaiveDatetime = Field(index=True)
    appointment_date: date = Field(index=True)
    duration_minutes: int
    price: Decimal = Field(max_digits=10, decimal_places=2)
    status: str
    notes: Optional[str] = None
    created_date: NaiveDatetime

class BookingLedgerRecord(SQLModel, table=True):
    """One row per trainer and day, bumped by every booking on that day"""
    __tablename__ = "booking_ledger"

    trainer_id: str = Field(primary_key=True)
    day: date = Field(primary_key=True)
    version: int = 1
