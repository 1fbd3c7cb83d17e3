import pytest
from datetime import datetime, time
from unittest.mock import MagicMock

from gymbooking.models.mod_appointment import AppointmentStatus
from gymbooking.models.mod_schedule import DayOfWeek
from gymbooking.scheduling.availability import AvailabilityEvaluator

# 2025-06-02 is a Monday
MONDAY = datetime(2025, 6, 2)

def monday_at(hour, minute=0):
    return MONDAY.replace(hour=hour, minute=minute)

class TestAvailabilityEvaluator:
    @pytest.fixture
    def snapshot(self, make_snapshot, make_hours):
        return make_snapshot(working_hours=[
            make_hours("trainer1", DayOfWeek.MONDAY, time(9), time(12))
        ])

    @pytest.fixture
    def evaluator(self, snapshot):
        return AvailabilityEvaluator(snapshot)

    def test_available_inside_working_hours_without_bookings(self, evaluator):
        assert evaluator.is_available("trainer1", monday_at(9), 60) is True

    def test_last_window_that_ends_at_closing_fits(self, evaluator):
        assert evaluator.is_available("trainer1", monday_at(11), 60) is True

    def test_not_available_before_opening(self, evaluator):
        assert evaluator.is_available("trainer1", monday_at(8), 30) is False

    def test_not_available_when_end_passes_closing(self, evaluator):
        assert evaluator.is_available("trainer1", monday_at(11, 30), 60) is False

    def test_not_available_entirely_outside_hours(self, evaluator):
        assert evaluator.is_available("trainer1", monday_at(15), 30) is False

    def test_not_available_on_day_without_working_hours(self, evaluator):
        tuesday = datetime(2025, 6, 3, 10, 0)
        assert evaluator.is_available("trainer1", tuesday, 30) is False

    def test_unknown_trainer_is_not_available(self, evaluator):
        assert evaluator.is_available("ghost", monday_at(10), 30) is False

    def test_request_running_past_midnight_does_not_fit(self, make_hours):
        late_hours = make_hours("trainer1", DayOfWeek.MONDAY, time(20), time(23, 30))

        # Ends at 01:00 on Tuesday, which is earlier than 23:30 by clock time only
        assert AvailabilityEvaluator.fits_working_hours(late_hours, monday_at(23), 120) is False
        assert AvailabilityEvaluator.fits_working_hours(late_hours, monday_at(22), 90) is True

    def test_missing_working_hours_skip_appointment_lookup(self):
        reader = MagicMock()
        reader.get_working_hours.return_value = []

        assert AvailabilityEvaluator(reader).is_available("trainer1", monday_at(10), 30) is False
        reader.get_appointments.assert_not_called()

    def test_outside_hours_skip_appointment_lookup(self, make_hours):
        reader = MagicMock()
        reader.get_working_hours.return_value = [make_hours("trainer1", DayOfWeek.MONDAY, time(9), time(12))]

        assert AvailabilityEvaluator(reader).is_available("trainer1", monday_at(13), 30) is False
        reader.get_appointments.assert_not_called()

    def test_not_available_when_overlapping_booking(self, snapshot, evaluator, make_appointment):
        snapshot.appointments.append(make_appointment("trainer1", monday_at(10), 60))

        assert evaluator.is_available("trainer1", monday_at(10, 30), 30) is False

    def test_available_right_after_booking(self, snapshot, evaluator, make_appointment):
        snapshot.appointments.append(make_appointment("trainer1", monday_at(10), 60))

        assert evaluator.is_available("trainer1", monday_at(11), 60) is True

    def test_cancelled_booking_frees_the_slot(self, snapshot, evaluator, make_appointment):
        snapshot.appointments.append(
            make_appointment("trainer1", monday_at(10), 60, status=AppointmentStatus.CANCELLED)
        )

        assert evaluator.is_available("trainer1", monday_at(10), 60) is True

    def test_edited_appointment_is_excluded(self, snapshot, evaluator, make_appointment):
        booked = make_appointment("trainer1", monday_at(10), 60, appointment_id="editing")
        snapshot.appointments.append(booked)

        assert evaluator.is_available("trainer1", monday_at(10, 30), 60, exclude_appointment_id="editing") is True

    def test_appointments_fetched_for_day_and_previous_day(self):
        reader = MagicMock()
        reader.get_appointments.return_value = []
        evaluator = AvailabilityEvaluator(reader)

        evaluator.appointments_for("trainer1", MONDAY.date())

        reader.get_appointments.assert_called_once_with(
            "trainer1", datetime(2025, 6, 1).date(), MONDAY.date()
        )
