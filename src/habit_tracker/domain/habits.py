"""Habit definitions and per-type metric tables."""

from dataclasses import dataclass, field
from enum import StrEnum


class HabitType(StrEnum):
    """Built-in habit types."""

    EXERCISE = "exercise"
    SLEEP = "sleep"
    NUTRITION = "nutrition"


class AggregationMode(StrEnum):
    """How a daily metric rolls up into its weekly target."""

    SUM = "sum"
    AVERAGE = "average"


@dataclass(frozen=True)
class HabitTargets:
    """Daily and weekly numeric targets keyed by metric name."""

    daily: dict[str, float] = field(default_factory=dict)
    weekly: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class HabitConfig:
    """Catalog entry describing a habit and its goals."""

    id: str
    name: str
    icon: str
    color: str
    is_active: bool = True
    goals: dict[str, float | str] = field(default_factory=dict)
    targets: HabitTargets = field(default_factory=HabitTargets)
    aggregation: dict[str, AggregationMode] = field(default_factory=dict)

    def aggregation_mode(self, metric: str) -> AggregationMode:
        """Return the weekly aggregation mode for a metric."""
        return self.aggregation.get(metric, AggregationMode.SUM)


@dataclass(frozen=True)
class HabitProfile:
    """Metric table shared by validation, progress and weekly views.

    `score_weights` defines the composite score used to rank days; the
    trend metric is what the weekly chart and trend classification read.
    """

    habit_id: str
    metrics: tuple[str, ...]
    score_weights: tuple[tuple[str, float], ...]
    trend_metric: str | None

    def score(self, metrics: dict[str, object]) -> float:
        """Return the composite score for a day's metrics."""
        return sum(
            numeric_value(metrics.get(name)) * weight
            for name, weight in self.score_weights
        )

    def trend_value(self, metrics: dict[str, object]) -> float:
        """Return the trend metric value, or 0 when untracked."""
        if self.trend_metric is None:
            return 0.0
        return numeric_value(metrics.get(self.trend_metric))


BUILTIN_PROFILES: dict[HabitType, HabitProfile] = {
    HabitType.EXERCISE: HabitProfile(
        habit_id=HabitType.EXERCISE,
        metrics=("duration", "calories", "exercises"),
        score_weights=(("duration", 1.0), ("calories", 0.1)),
        trend_metric="duration",
    ),
    HabitType.SLEEP: HabitProfile(
        habit_id=HabitType.SLEEP,
        metrics=("duration", "quality"),
        score_weights=(("duration", 1.0), ("quality", 1.0)),
        trend_metric="duration",
    ),
    HabitType.NUTRITION: HabitProfile(
        habit_id=HabitType.NUTRITION,
        metrics=("calories", "water", "meals"),
        score_weights=(("water", 1.0), ("meals", 1.0)),
        trend_metric="water",
    ),
}


def builtin_type(habit_id: str) -> HabitType | None:
    """Return the built-in type for an id, if it is one."""
    try:
        return HabitType(habit_id)
    except ValueError:
        return None


def profile_for(habit_id: str, config: HabitConfig | None = None) -> HabitProfile:
    """Return the metric profile for a built-in or custom habit."""
    habit_type = builtin_type(habit_id)
    if habit_type is not None:
        return BUILTIN_PROFILES[habit_type]
    metrics = tuple(config.targets.daily) if config else ()
    return HabitProfile(
        habit_id=habit_id,
        metrics=metrics,
        score_weights=tuple((name, 1.0) for name in metrics),
        trend_metric=metrics[0] if metrics else None,
    )


def numeric_value(value: object) -> float:
    """Return a metric as a float, treating missing or non-numeric as 0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)


def derive_weekly_targets(
    daily: dict[str, float], aggregation: dict[str, AggregationMode]
) -> dict[str, float]:
    """Derive weekly targets from daily ones using each metric's mode."""
    weekly: dict[str, float] = {}
    for metric, value in daily.items():
        mode = aggregation.get(metric, AggregationMode.SUM)
        weekly[metric] = value if mode == AggregationMode.AVERAGE else value * 7
    return weekly
