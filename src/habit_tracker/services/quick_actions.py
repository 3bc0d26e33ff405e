"""Shortcuts for common habit submissions."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from habit_tracker.domain.habits import HabitType, numeric_value
from habit_tracker.domain.validation import MAX_EXERCISE_CALORIES, ValidationResult
from habit_tracker.services.tracker import HabitTrackerService

CALORIES_PER_MINUTE = 8
DEFAULT_INTENSITY = 2
_TIME_FORMAT = "%H:%M"


@dataclass
class QuickActionService:
    """One-tap actions layered over the tracker service."""

    tracker: HabitTrackerService

    def add_quick_workout(self, workout_type: str, duration: float) -> ValidationResult:
        """Log a workout with estimated calories, capped at the exercise maximum."""
        calories = min(duration * CALORIES_PER_MINUTE, MAX_EXERCISE_CALORIES)
        return self.tracker.submit_record(
            HabitType.EXERCISE,
            {
                "type": workout_type,
                "duration": duration,
                "calories": calories,
                "exercises": 1,
                "intensity": DEFAULT_INTENSITY,
            },
        )

    def record_last_night(
        self, bedtime: str, wakeup_time: str, quality: float
    ) -> ValidationResult:
        """Log last night's sleep, deriving the duration from the two times."""
        return self.tracker.submit_record(
            HabitType.SLEEP,
            {
                "bedtime": bedtime,
                "wakeupTime": wakeup_time,
                "duration": sleep_hours(bedtime, wakeup_time),
                "quality": quality,
            },
        )

    def add_water_glass(self) -> ValidationResult:
        """Add one glass of water to today's nutrition record."""
        current = self._today_metric("water")
        return self.tracker.update_record(
            HabitType.NUTRITION, {"water": current + 1}
        )

    def add_meal(self, calories: float, protein: float = 0) -> ValidationResult:
        """Add a meal and its calories and protein to today's totals."""
        return self.tracker.update_record(
            HabitType.NUTRITION,
            {
                "meals": self._today_metric("meals") + 1,
                "calories": self._today_metric("calories") + calories,
                "protein": self._today_metric("protein") + protein,
            },
        )

    def _today_metric(self, metric: str) -> float:
        record = self.tracker.get_record(HabitType.NUTRITION)
        return numeric_value(record.metrics.get(metric)) if record else 0.0


def sleep_hours(bedtime: str, wakeup_time: str) -> float:
    """Return hours slept, rolling the wake time past midnight when needed."""
    try:
        bed = datetime.strptime(bedtime.strip(), _TIME_FORMAT)
        wake = datetime.strptime(wakeup_time.strip(), _TIME_FORMAT)
    except ValueError:
        return 0.0
    if wake <= bed:
        wake += timedelta(days=1)
    return (wake - bed).total_seconds() / 3600
