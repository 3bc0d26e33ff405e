"""Daily progress against habit targets."""

import math

from habit_tracker.domain.habits import HabitConfig, numeric_value, profile_for
from habit_tracker.domain.progress import DailyProgress
from habit_tracker.domain.records import HabitRecord

MAX_PERCENT = 100.0


def compute_daily_progress(
    habit_id: str, record: HabitRecord | None, config: HabitConfig | None
) -> DailyProgress:
    """Score one day's record against the habit's daily targets.

    Each tracked metric with a positive target yields a percentage capped
    at 100; `overall` is their mean rounded half up. Details keep the
    unrounded values.
    """
    if record is None or config is None:
        return DailyProgress(overall=0, details={})

    targets = config.targets.daily
    details: dict[str, float] = {}
    for metric in profile_for(habit_id, config).metrics:
        target = numeric_value(targets.get(metric))
        if target <= 0:
            continue
        recorded = numeric_value(record.metrics.get(metric))
        details[metric] = percent_of(recorded, target)

    if not details:
        return DailyProgress(overall=0, details={})
    overall = round_half_up(sum(details.values()) / len(details))
    return DailyProgress(overall=overall, details=details)


def percent_of(value: float, target: float) -> float:
    """Return value as a percentage of target, capped at 100."""
    return min(value * 100 / target, MAX_PERCENT)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
