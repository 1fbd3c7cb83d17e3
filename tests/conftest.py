import pytest
from datetime import datetime, time
from decimal import Decimal

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine
from fastapi.testclient import TestClient

from gymbooking.models.mod_appointment import Appointment, AppointmentStatus
from gymbooking.models.mod_catalog import Service, ServiceType, Trainer
from gymbooking.models.mod_schedule import DayOfWeek, ScheduleOwner, WorkingHours
from gymbooking.models.mod_tables import ServiceRecord, TrainerRecord
from gymbooking.services.svc_records import appointment_to_record, working_hours_to_record
from gymbooking.configuration.database import get_session
from gymbooking.backmain import app


@pytest.fixture
def make_trainer():
    def _make(trainer_id, first_name="Alex", last_name="Smith", expertise=()):
        return Trainer(
            id=trainer_id,
            first_name=first_name,
            last_name=last_name,
            email=f"{trainer_id}@gym.test",
            center_id="center1",
            expertise=list(expertise)
        )
    return _make

@pytest.fixture
def make_service():
    def _make(service_id="yoga", duration_minutes=60, price="25.00"):
        return Service(
            id=service_id,
            name=service_id.capitalize(),
            type=ServiceType.YOGA,
            description=f"{service_id} session",
            price=Decimal(price),
            duration_minutes=duration_minutes,
            center_id="center1"
        )
    return _make

@pytest.fixture
def make_hours():
    def _make(trainer_id, day=DayOfWeek.MONDAY, start=time(9, 0), end=time(12, 0), entry_id=None):
        return WorkingHours(
            id=entry_id or f"wh-{trainer_id}-{int(day)}",
            owner=ScheduleOwner.trainer(trainer_id),
            day_of_week=day,
            start_time=start,
            end_time=end
        )
    return _make

@pytest.fixture
def make_appointment():
    def _make(trainer_id, start, duration_minutes=60, status=AppointmentStatus.CONFIRMED, appointment_id=None):
        return Appointment(
            id=appointment_id or f"apt-{trainer_id}-{start.isoformat()}",
            member_id="member1",
            trainer_id=trainer_id,
            service_id="yoga",
            appointment_datetime=start,
            duration_minutes=duration_minutes,
            price=Decimal("25.00"),
            status=status,
            created_date=datetime(2025, 5, 1, 12, 0)
        )
    return _make

@pytest.fixture
def session():
    """Session on a fresh in-memory database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session

@pytest.fixture
def seed(session):
    """Store domain objects as database records"""
    def _seed(trainers=(), services=(), working_hours=(), appointments=()):
        for trainer in trainers:
            session.add(TrainerRecord(**trainer.model_dump()))
        for service in services:
            session.add(ServiceRecord(
                id=service.id,
                name=service.name,
                type=service.type.value,
                description=service.description,
                price=service.price,
                duration_minutes=service.duration_minutes,
                center_id=service.center_id
            ))
        for entry in working_hours:
            session.add(working_hours_to_record(entry))
        for appointment in appointments:
            session.add(appointment_to_record(appointment))
        session.commit()
        # Later lookups go back to the database
        session.expunge_all()
    return _seed

@pytest.fixture
def client(session):
    """API client whose requests share the test session"""
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


class ScheduleSnapshot:
    """In-memory ScheduleReader over already built domain objects."""

    def __init__(self, trainers=(), services=(), working_hours=(), appointments=()):
        self.trainers = list(trainers)
        self.services = {service.id: service for service in services}
        self.working_hours = list(working_hours)
        self.appointments = list(appointments)

    def get_working_hours(self, owner):
        return [entry for entry in self.working_hours if entry.owner == owner]

    def get_appointments(self, trainer_id, start_date, end_date):
        return [
            appointment for appointment in self.appointments
            if appointment.trainer_id == trainer_id
            and start_date <= appointment.appointment_datetime.date() <= end_date
        ]

    def get_service_by_id(self, service_id):
        return self.services.get(service_id)

    def get_trainers_qualified_for(self, service_id):
        return [trainer for trainer in self.trainers if trainer.is_qualified_for(service_id)]

@pytest.fixture
def make_snapshot():
    """Build an in-memory schedule reader for engine tests"""
    return ScheduleSnapshot
