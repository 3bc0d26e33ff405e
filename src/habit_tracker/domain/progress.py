"""Domain models for progress and weekly summaries."""

from dataclasses import dataclass, field
from enum import StrEnum

from habit_tracker.domain.records import HabitRecord


class Trend(StrEnum):
    """Direction of the trend metric across the week."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True)
class DailyProgress:
    """Per-metric and overall progress against daily targets."""

    overall: int
    details: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class DaySummary:
    """A single day inside the weekly window."""

    date: str
    day_name: str
    record: HabitRecord | None


@dataclass(frozen=True)
class ChartPoint:
    """Plot point for the weekly chart."""

    label: str
    value: float
    date: str


@dataclass(frozen=True)
class WeeklyView:
    """Seven-day summary for one habit, oldest day first."""

    days: list[DaySummary]
    progress_percentage: int
    best_day: DaySummary | None
    worst_day: DaySummary | None
    trend: Trend
    chart_data: list[ChartPoint]
    target_progress: dict[str, float] = field(default_factory=dict)
