"""Request bodies for the HTTP API."""

from pydantic import BaseModel, Field

from habit_tracker.domain.habits import AggregationMode


class GoalsUpdate(BaseModel):
    """Goal values to merge into a habit."""

    goals: dict[str, float | str]


class TargetsUpdate(BaseModel):
    """Daily and weekly targets to merge into a habit."""

    daily: dict[str, float] | None = None
    weekly: dict[str, float] | None = None


class CustomHabitCreate(BaseModel):
    """Definition of a user-defined habit."""

    id: str | None = None
    name: str = Field(min_length=1)
    icon: str = "star"
    color: str = "#9E9E9E"
    goals: dict[str, float | str] = Field(default_factory=dict)
    daily_targets: dict[str, float] = Field(default_factory=dict)
    weekly_targets: dict[str, float] | None = None
    aggregation: dict[str, AggregationMode] = Field(default_factory=dict)


class HabitOrder(BaseModel):
    """Display order of habit ids."""

    order: list[str]
