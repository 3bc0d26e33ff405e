"""Weekly summaries over a trailing seven-day window."""

from collections.abc import Mapping
from datetime import date

from habit_tracker.domain.dates import DEFAULT_LOCALE, trailing_days, weekday_short_name
from habit_tracker.domain.habits import (
    AggregationMode,
    HabitConfig,
    HabitProfile,
    numeric_value,
    profile_for,
)
from habit_tracker.domain.progress import ChartPoint, DaySummary, Trend, WeeklyView
from habit_tracker.domain.records import HabitRecord
from habit_tracker.services.progress import percent_of, round_half_up

WINDOW_DAYS = 7
TREND_SPAN = 3
TREND_THRESHOLD = 0.1


def compute_weekly_view(
    habit_id: str,
    records_by_date: Mapping[str, HabitRecord],
    config: HabitConfig | None,
    today: date,
    locale: str = DEFAULT_LOCALE,
) -> WeeklyView | None:
    """Summarize the seven days ending today for one habit.

    Returns None when the habit has no configuration.
    """
    if config is None:
        return None

    profile = profile_for(habit_id, config)
    days = [
        DaySummary(
            date=day.isoformat(),
            day_name=weekday_short_name(day, locale),
            record=records_by_date.get(day.isoformat()),
        )
        for day in trailing_days(today, WINDOW_DAYS)
    ]
    recorded = [day for day in days if day.record is not None]

    best_day = worst_day = None
    if recorded:
        # max/min keep the first of equal scores, i.e. the earliest day
        best_day = max(recorded, key=lambda day: _day_score(profile, day))
        worst_day = min(recorded, key=lambda day: _day_score(profile, day))

    return WeeklyView(
        days=days,
        progress_percentage=round_half_up(len(recorded) / WINDOW_DAYS * 100),
        best_day=best_day,
        worst_day=worst_day,
        trend=classify_trend(profile, days),
        chart_data=[
            ChartPoint(
                label=day.day_name,
                value=profile.trend_value(day.record.metrics) if day.record else 0,
                date=day.date,
            )
            for day in days
        ],
        target_progress=_weekly_target_progress(profile, config, recorded),
    )


def classify_trend(profile: HabitProfile, days: list[DaySummary]) -> Trend:
    """Compare the trend metric's recent mean to its earlier mean."""
    recent = _trend_mean(profile, days[-TREND_SPAN:])
    earlier = _trend_mean(profile, days[:TREND_SPAN])
    difference = recent - earlier
    if difference > TREND_THRESHOLD:
        return Trend.IMPROVING
    if difference < -TREND_THRESHOLD:
        return Trend.DECLINING
    return Trend.STABLE


def _trend_mean(profile: HabitProfile, days: list[DaySummary]) -> float:
    values = [profile.trend_value(day.record.metrics) for day in days if day.record]
    if not values:
        return 0.0
    return sum(values) / len(values)


def _day_score(profile: HabitProfile, day: DaySummary) -> float:
    return profile.score(day.record.metrics) if day.record else 0.0


def _weekly_target_progress(
    profile: HabitProfile, config: HabitConfig, recorded: list[DaySummary]
) -> dict[str, float]:
    progress: dict[str, float] = {}
    for metric in profile.metrics:
        target = numeric_value(config.targets.weekly.get(metric))
        if target <= 0:
            continue
        values = [
            numeric_value(day.record.metrics.get(metric))
            for day in recorded
            if day.record
        ]
        total = sum(values)
        if config.aggregation_mode(metric) == AggregationMode.AVERAGE:
            total = total / len(values) if values else 0.0
        progress[metric] = percent_of(total, target)
    return progress
