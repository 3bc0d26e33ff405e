"""Tests for quick actions."""

import pytest

from habit_tracker.services.quick_actions import QuickActionService, sleep_hours
from habit_tracker.services.tracker import HabitTrackerService


def test_quick_workout_estimates_calories(tracker: HabitTrackerService) -> None:
    result = QuickActionService(tracker).add_quick_workout("cycling", 30)

    record = tracker.get_record("exercise")
    assert result.is_valid
    assert record is not None
    assert record.metrics["calories"] == 240
    assert record.metrics["intensity"] == 2


def test_long_workout_caps_estimated_calories(tracker: HabitTrackerService) -> None:
    result = QuickActionService(tracker).add_quick_workout("hike", 260)

    record = tracker.get_record("exercise")
    assert result.is_valid
    assert record is not None
    assert record.metrics["calories"] == 2000


def test_quick_workout_is_validated(tracker: HabitTrackerService) -> None:
    result = QuickActionService(tracker).add_quick_workout("ultra", 500)

    assert not result.is_valid
    assert set(result.errors) == {"duration"}
    assert tracker.get_record("exercise") is None


def test_record_last_night_crosses_midnight(tracker: HabitTrackerService) -> None:
    result = QuickActionService(tracker).record_last_night("23:30", "07:00", 8)

    assert result.is_valid
    record = tracker.get_record("sleep")
    assert record is not None
    assert record.metrics["duration"] == 7.5


@pytest.mark.parametrize(
    ("bedtime", "wakeup", "hours"),
    [("23:00", "07:00", 8), ("01:00", "07:30", 6.5), ("22:00", "22:00", 24)],
)
def test_sleep_hours(bedtime: str, wakeup: str, hours: float) -> None:
    assert sleep_hours(bedtime, wakeup) == hours


def test_sleep_hours_with_bad_time_is_zero() -> None:
    assert sleep_hours("late", "07:00") == 0


def test_water_and_meals_accumulate(tracker: HabitTrackerService) -> None:
    actions = QuickActionService(tracker)

    actions.add_water_glass()
    actions.add_water_glass()
    actions.add_meal(600, protein=30)
    actions.add_meal(400)

    record = tracker.get_record("nutrition")
    assert record is not None
    assert record.metrics == {"water": 2, "meals": 2, "calories": 1000, "protein": 30}
