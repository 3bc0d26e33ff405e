"""Tests for the weekly summary."""

from datetime import timedelta

from habit_tracker.domain.habits import HabitConfig, HabitTargets
from habit_tracker.domain.progress import Trend
from habit_tracker.services.habits import default_habits
from habit_tracker.services.weekly import compute_weekly_view
from tests.conftest import TODAY, make_record

HABITS = {habit.id: habit for habit in default_habits()}


def _key(days_ago: int) -> str:
    return (TODAY - timedelta(days=days_ago)).isoformat()


def test_unconfigured_habit_returns_none() -> None:
    assert compute_weekly_view("exercise", {}, None, TODAY) is None


def test_empty_week_still_has_seven_days() -> None:
    view = compute_weekly_view("exercise", {}, HABITS["exercise"], TODAY)

    assert view is not None
    assert len(view.days) == 7
    assert all(day.record is None for day in view.days)
    assert view.progress_percentage == 0
    assert view.best_day is None
    assert view.worst_day is None
    assert view.trend == Trend.STABLE
    assert [point.value for point in view.chart_data] == [0] * 7


def test_days_are_ordered_oldest_first_with_weekday_names() -> None:
    view = compute_weekly_view("sleep", {}, HABITS["sleep"], TODAY)

    assert view is not None
    assert view.days[0].date == "2024-01-01"
    assert view.days[-1].date == "2024-01-07"
    assert [day.day_name for day in view.days] == [
        "lun",
        "mar",
        "mié",
        "jue",
        "vie",
        "sáb",
        "dom",
    ]


def test_english_weekday_names() -> None:
    view = compute_weekly_view("sleep", {}, HABITS["sleep"], TODAY, locale="en-US")

    assert view is not None
    assert view.days[0].day_name == "Mon"


def test_sparse_exercise_week() -> None:
    records = {
        _key(6): make_record(duration=10),
        _key(4): make_record(duration=20),
        _key(2): make_record(duration=30),
        _key(0): make_record(duration=40),
    }

    view = compute_weekly_view("exercise", records, HABITS["exercise"], TODAY)

    assert view is not None
    assert view.progress_percentage == 57
    assert view.trend == Trend.IMPROVING
    assert view.best_day is not None and view.best_day.date == _key(0)
    assert view.worst_day is not None and view.worst_day.date == _key(6)
    assert [point.value for point in view.chart_data] == [10, 0, 20, 0, 30, 0, 40]


def test_declining_sleep_trend() -> None:
    records = {
        _key(6): make_record(duration=8, quality=8),
        _key(0): make_record(duration=6, quality=8),
    }

    view = compute_weekly_view("sleep", records, HABITS["sleep"], TODAY)

    assert view is not None
    assert view.trend == Trend.DECLINING


def test_small_difference_is_stable() -> None:
    records = {
        _key(5): make_record(water=8),
        _key(1): make_record(water=8.05),
    }

    view = compute_weekly_view("nutrition", records, HABITS["nutrition"], TODAY)

    assert view is not None
    assert view.trend == Trend.STABLE


def test_empty_half_window_counts_as_zero() -> None:
    records = {_key(0): make_record(water=4)}

    view = compute_weekly_view("nutrition", records, HABITS["nutrition"], TODAY)

    assert view is not None
    assert view.trend == Trend.IMPROVING


def test_exercise_score_weights_calories() -> None:
    records = {
        _key(3): make_record(duration=30, calories=500),
        _key(2): make_record(duration=60, calories=0),
    }

    view = compute_weekly_view("exercise", records, HABITS["exercise"], TODAY)

    assert view is not None
    assert view.best_day is not None and view.best_day.date == _key(3)
    assert view.worst_day is not None and view.worst_day.date == _key(2)


def test_ties_resolve_to_earliest_day() -> None:
    records = {
        _key(5): make_record(water=5, meals=3),
        _key(3): make_record(water=4, meals=4),
        _key(1): make_record(water=3, meals=5),
    }

    view = compute_weekly_view("nutrition", records, HABITS["nutrition"], TODAY)

    assert view is not None
    assert view.best_day is not None and view.best_day.date == _key(5)
    assert view.worst_day is not None and view.worst_day.date == _key(5)


def test_records_outside_window_are_ignored() -> None:
    records = {_key(7): make_record(duration=100), _key(8): make_record(duration=90)}

    view = compute_weekly_view("exercise", records, HABITS["exercise"], TODAY)

    assert view is not None
    assert view.progress_percentage == 0


def test_target_progress_sums_and_averages() -> None:
    records = {
        _key(1): make_record(duration=7, quality=6),
        _key(0): make_record(duration=9, quality=10),
    }
    sleep = compute_weekly_view("sleep", records, HABITS["sleep"], TODAY)

    assert sleep is not None
    assert sleep.target_progress == {"duration": 100, "quality": 100}

    exercise_records = {_key(0): make_record(duration=150, calories=0, exercises=3)}
    exercise = compute_weekly_view(
        "exercise", exercise_records, HABITS["exercise"], TODAY
    )

    assert exercise is not None
    assert exercise.target_progress == {"duration": 50, "calories": 0, "exercises": 20}


def test_custom_habit_week_uses_first_target_for_trend() -> None:
    config = HabitConfig(
        id="reading",
        name="Reading",
        icon="book",
        color="#795548",
        targets=HabitTargets(daily={"pages": 20}),
    )
    records = {_key(6): make_record(pages=5), _key(0): make_record(pages=25)}

    view = compute_weekly_view("reading", records, config, TODAY)

    assert view is not None
    assert view.trend == Trend.IMPROVING
    assert view.chart_data[-1].value == 25
