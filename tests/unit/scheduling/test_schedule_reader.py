import pytest
from datetime import date, datetime, time
from decimal import Decimal

from gymbooking.models.mod_appointment import AppointmentStatus
from gymbooking.models.mod_catalog import ServiceType
from gymbooking.models.mod_schedule import DayOfWeek, ScheduleOwner, WorkingHours
from gymbooking.services.svc_schedule_reader import SqlScheduleReader


class TestSqlScheduleReader:
    @pytest.fixture
    def reader(self, session):
        return SqlScheduleReader(session)

    def test_working_hours_filtered_by_owner(self, reader, seed, make_hours):
        center_hours = WorkingHours(
            id="wh-center",
            owner=ScheduleOwner.center("trainer1"),
            day_of_week=DayOfWeek.MONDAY,
            start_time=time(6, 0),
            end_time=time(22, 0)
        )
        seed(working_hours=[
            make_hours("trainer1", DayOfWeek.MONDAY),
            make_hours("trainer1", DayOfWeek.TUESDAY, time(13), time(18)),
            make_hours("trainer2", DayOfWeek.MONDAY),
            center_hours
        ])

        result = reader.get_working_hours(ScheduleOwner.trainer("trainer1"))

        assert sorted(entry.id for entry in result) == ["wh-trainer1-1", "wh-trainer1-2"]
        assert all(entry.owner == ScheduleOwner.trainer("trainer1") for entry in result)
        tuesday = next(entry for entry in result if entry.day_of_week == DayOfWeek.TUESDAY)
        assert tuesday.start_time == time(13) and tuesday.end_time == time(18)

    def test_appointments_filtered_by_trainer_and_day_range(self, reader, seed, make_appointment):
        seed(appointments=[
            make_appointment("trainer1", datetime(2025, 6, 1, 23, 30), appointment_id="sunday"),
            make_appointment("trainer1", datetime(2025, 6, 2, 9, 0), appointment_id="monday"),
            make_appointment(
                "trainer1", datetime(2025, 6, 2, 11, 0),
                status=AppointmentStatus.CANCELLED, appointment_id="cancelled"
            ),
            make_appointment("trainer1", datetime(2025, 6, 3, 9, 0), appointment_id="tuesday"),
            make_appointment("trainer2", datetime(2025, 6, 2, 9, 0), appointment_id="other")
        ])

        result = reader.get_appointments("trainer1", date(2025, 6, 1), date(2025, 6, 2))

        # Any status is returned, callers decide what blocks
        assert sorted(a.id for a in result) == ["cancelled", "monday", "sunday"]

    def test_service_by_id(self, reader, seed, make_service):
        seed(services=[make_service("yoga", 45, "19.50")])

        service = reader.get_service_by_id("yoga")

        assert service.type == ServiceType.YOGA
        assert service.duration_minutes == 45
        assert service.price == Decimal("19.50")
        assert reader.get_service_by_id("boxing") is None

    def test_trainers_qualified_for_service(self, reader, seed, make_trainer):
        seed(trainers=[
            make_trainer("trainer1", expertise=["yoga", "pilates"]),
            make_trainer("trainer2", expertise=["pilates"]),
            make_trainer("trainer3")
        ])

        result = reader.get_trainers_qualified_for("yoga")

        assert [trainer.id for trainer in result] == ["trainer1"]
        assert result[0].expertise == ["yoga", "pilates"]

    def test_appointment_times_stored_without_offset(self, reader, seed, make_appointment):
        start = datetime(2025, 6, 2, 10, 15)
        seed(appointments=[make_appointment("trainer1", start, 45, appointment_id="apt1")])

        [appointment] = reader.get_appointments("trainer1", date(2025, 6, 2), date(2025, 6, 2))

        assert appointment.appointment_datetime == start
        assert appointment.appointment_datetime.tzinfo is None
        assert appointment.created_date == datetime(2025, 5, 1, 12, 0)
        assert appointment.created_date.tzinfo is None
        assert appointment.end_datetime == datetime(2025, 6, 2, 11, 0)
