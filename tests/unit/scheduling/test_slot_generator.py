import pytest
from datetime import date, datetime, time

from gymbooking.models.mod_appointment import AppointmentStatus
from gymbooking.models.mod_schedule import DayOfWeek
from gymbooking.scheduling.availability import AvailabilityEvaluator
from gymbooking.scheduling.slots import SlotGenerator

# 2025-06-02 is a Monday
MONDAY = date(2025, 6, 2)
BEFORE_MONDAY = datetime(2025, 5, 20, 8, 0)

class TestSlotGenerator:
    @pytest.fixture
    def snapshot(self, make_snapshot, make_hours):
        return make_snapshot(working_hours=[
            make_hours("trainer1", DayOfWeek.MONDAY, time(9), time(12))
        ])

    @pytest.fixture
    def generator(self, snapshot):
        return SlotGenerator(AvailabilityEvaluator(snapshot))

    def test_fixed_grid_for_future_date(self, generator):
        slots = generator.available_slots("trainer1", MONDAY, 60, BEFORE_MONDAY)

        assert slots == [time(9), time(9, 30), time(10), time(10, 30), time(11)]

    def test_grid_does_not_depend_on_duration(self, generator):
        slots = generator.available_slots("trainer1", MONDAY, 45, BEFORE_MONDAY)

        assert slots == [time(9), time(9, 30), time(10), time(10, 30), time(11)]

    def test_duration_longer_than_working_hours_has_no_slots(self, generator):
        assert generator.available_slots("trainer1", MONDAY, 240, BEFORE_MONDAY) == []

    def test_no_working_hours_for_day(self, generator):
        tuesday = date(2025, 6, 3)
        assert generator.available_slots("trainer1", tuesday, 60, BEFORE_MONDAY) == []

    def test_conflicting_slots_removed(self, snapshot, generator, make_appointment):
        snapshot.appointments.append(make_appointment("trainer1", datetime(2025, 6, 2, 10, 0), 60))

        slots = generator.available_slots("trainer1", MONDAY, 60, BEFORE_MONDAY)

        assert slots == [time(9), time(11)]

    def test_cancelled_appointments_do_not_block(self, snapshot, generator, make_appointment):
        snapshot.appointments.append(
            make_appointment("trainer1", datetime(2025, 6, 2, 10, 0), 60, status=AppointmentStatus.CANCELLED)
        )

        slots = generator.available_slots("trainer1", MONDAY, 60, BEFORE_MONDAY)

        assert len(slots) == 5

    def test_appointments_on_other_days_ignored(self, snapshot, generator, make_appointment):
        snapshot.appointments.append(make_appointment("trainer1", datetime(2025, 6, 9, 10, 0), 60))

        assert len(generator.available_slots("trainer1", MONDAY, 60, BEFORE_MONDAY)) == 5

    def test_today_only_keeps_slots_strictly_after_now(self, generator):
        now = datetime(2025, 6, 2, 10, 0)

        slots = generator.available_slots("trainer1", MONDAY, 60, now)

        assert slots == [time(10, 30), time(11)]

    def test_today_between_grid_points(self, generator):
        now = datetime(2025, 6, 2, 9, 10)

        slots = generator.available_slots("trainer1", MONDAY, 60, now)

        assert slots == [time(9, 30), time(10), time(10, 30), time(11)]

    def test_past_date_has_no_slots(self, generator):
        after_monday = datetime(2025, 6, 3, 7, 0)

        assert generator.available_slots("trainer1", MONDAY, 60, after_monday) == []

    def test_lead_time_pushes_cutoff(self, snapshot):
        generator = SlotGenerator(AvailabilityEvaluator(snapshot), lead_minutes=60)
        now = datetime(2025, 6, 2, 9, 0)

        slots = generator.available_slots("trainer1", MONDAY, 60, now)

        assert slots == [time(10, 30), time(11)]

    def test_custom_granularity(self, snapshot):
        generator = SlotGenerator(AvailabilityEvaluator(snapshot), granularity_minutes=15)

        slots = generator.available_slots("trainer1", MONDAY, 150, BEFORE_MONDAY)

        assert slots == [time(9), time(9, 15), time(9, 30)]

    def test_result_is_restartable(self, generator):
        slots = generator.available_slots("trainer1", MONDAY, 60, BEFORE_MONDAY)

        assert list(slots) == list(slots)

    @pytest.mark.parametrize("granularity", [0, -30])
    def test_invalid_granularity_rejected(self, snapshot, granularity):
        with pytest.raises(ValueError):
            SlotGenerator(AvailabilityEvaluator(snapshot), granularity_minutes=granularity)
