"""Habit catalog: definitions, goals and targets."""

import itertools
import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import replace

from habit_tracker.domain.habits import (
    AggregationMode,
    HabitConfig,
    HabitTargets,
    HabitType,
    derive_weekly_targets,
)

_logger = logging.getLogger(__name__)


def default_habits() -> list[HabitConfig]:
    """Return the built-in habits with their starting goals."""
    return [
        HabitConfig(
            id=HabitType.EXERCISE,
            name="Ejercicio",
            icon="fitness",
            color="#FF5722",
            goals={"duration": 60, "frequency": 5, "calories": 400, "exercises": 3},
            targets=HabitTargets(
                daily={"duration": 60, "calories": 400, "exercises": 3},
                weekly={"duration": 300, "calories": 2000, "exercises": 15},
            ),
        ),
        HabitConfig(
            id=HabitType.SLEEP,
            name="Sueño",
            icon="moon",
            color="#3F51B5",
            goals={
                "duration": 8,
                "quality": 8,
                "bedtime": "23:00",
                "wakeupTime": "07:00",
            },
            targets=HabitTargets(
                daily={"duration": 8, "quality": 8},
                weekly={"duration": 8, "quality": 8},
            ),
            aggregation={
                "duration": AggregationMode.AVERAGE,
                "quality": AggregationMode.AVERAGE,
            },
        ),
        HabitConfig(
            id=HabitType.NUTRITION,
            name="Nutrición",
            icon="restaurant",
            color="#4CAF50",
            goals={"calories": 2000, "water": 8, "meals": 5, "protein": 150},
            targets=HabitTargets(
                daily={"calories": 2000, "water": 8, "meals": 5, "protein": 150},
                weekly={"calories": 14000, "water": 56, "meals": 35, "protein": 1050},
            ),
        ),
    ]


class HabitCatalog:
    """Holds habit configurations plus their active flags and display order.

    Lookups of unknown ids through `get_habit` return None; mutating
    operations on unknown ids raise KeyError.
    """

    def __init__(self, habits: Iterable[HabitConfig] | None = None) -> None:
        self._lock = threading.Lock()
        self._initial = list(habits) if habits is not None else default_habits()
        self._custom_ids = itertools.count(1)
        self._load(self._initial)

    def _load(self, habits: list[HabitConfig]) -> None:
        self._habits = {habit.id: habit for habit in habits}
        self._order = [habit.id for habit in habits]

    def get_habit(self, habit_id: str) -> HabitConfig | None:
        return self._habits.get(habit_id)

    def list_habits(self) -> list[HabitConfig]:
        return list(self._habits.values())

    def ordered_habits(self) -> list[HabitConfig]:
        habits = self._habits
        return [habits[habit_id] for habit_id in self._order if habit_id in habits]

    def active_habits(self) -> list[HabitConfig]:
        return [habit for habit in self._habits.values() if habit.is_active]

    def active_ordered_habits(self) -> list[HabitConfig]:
        return [habit for habit in self.ordered_habits() if habit.is_active]

    def update_goals(
        self, habit_id: str, goals: Mapping[str, float | str]
    ) -> HabitConfig:
        """Merge new goal values into a habit."""
        with self._lock:
            habit = self._require(habit_id)
            updated = replace(habit, goals={**habit.goals, **goals})
            self._habits = {**self._habits, habit_id: updated}
        _logger.info("Updated goals for %s: %s", habit_id, sorted(goals))
        return updated

    def update_targets(
        self,
        habit_id: str,
        daily: Mapping[str, float] | None = None,
        weekly: Mapping[str, float] | None = None,
    ) -> HabitConfig:
        """Merge new targets into a habit.

        Daily metrics changed without an explicit weekly value get their
        weekly target derived from the metric's aggregation mode.
        """
        with self._lock:
            habit = self._require(habit_id)
            daily_changes = dict(daily or {})
            weekly_changes = derive_weekly_targets(daily_changes, habit.aggregation)
            weekly_changes.update(weekly or {})
            targets = HabitTargets(
                daily={**habit.targets.daily, **daily_changes},
                weekly={**habit.targets.weekly, **weekly_changes},
            )
            updated = replace(habit, targets=targets)
            self._habits = {**self._habits, habit_id: updated}
        _logger.info("Updated targets for %s", habit_id)
        return updated

    def toggle_active(self, habit_id: str) -> HabitConfig:
        """Flip a habit's active flag."""
        with self._lock:
            habit = self._require(habit_id)
            updated = replace(habit, is_active=not habit.is_active)
            self._habits = {**self._habits, habit_id: updated}
        return updated

    def reorder(self, order: list[str]) -> list[HabitConfig]:
        """Set the display order; unknown ids are ignored, missing ones appended."""
        with self._lock:
            known = [habit_id for habit_id in order if habit_id in self._habits]
            rest = [habit_id for habit_id in self._order if habit_id not in known]
            self._order = list(dict.fromkeys(known)) + rest
        return self.ordered_habits()

    def add_custom_habit(  # noqa: PLR0913
        self,
        name: str,
        icon: str = "star",
        color: str = "#9E9E9E",
        goals: Mapping[str, float | str] | None = None,
        daily_targets: Mapping[str, float] | None = None,
        weekly_targets: Mapping[str, float] | None = None,
        aggregation: Mapping[str, AggregationMode] | None = None,
        habit_id: str | None = None,
    ) -> HabitConfig:
        """Register a user-defined habit and return it."""
        with self._lock:
            resolved_id = habit_id or self._next_custom_id()
            if resolved_id in self._habits:
                raise ValueError(f"Habit already exists: {resolved_id}")
            modes = dict(aggregation or {})
            daily = dict(daily_targets or {})
            weekly = derive_weekly_targets(daily, modes)
            weekly.update(weekly_targets or {})
            habit = HabitConfig(
                id=resolved_id,
                name=name,
                icon=icon,
                color=color,
                goals=dict(goals or {}),
                targets=HabitTargets(daily=daily, weekly=weekly),
                aggregation=modes,
            )
            self._habits = {**self._habits, resolved_id: habit}
            self._order = [*self._order, resolved_id]
        _logger.info("Added custom habit %s", resolved_id)
        return habit

    def remove_habit(self, habit_id: str) -> None:
        """Delete a habit from the catalog."""
        with self._lock:
            self._require(habit_id)
            self._habits = {
                key: value for key, value in self._habits.items() if key != habit_id
            }
            self._order = [key for key in self._order if key != habit_id]
        _logger.info("Removed habit %s", habit_id)

    def reset(self) -> None:
        """Restore the catalog to its initial habits."""
        with self._lock:
            self._load(self._initial)

    def _require(self, habit_id: str) -> HabitConfig:
        habit = self._habits.get(habit_id)
        if habit is None:
            raise KeyError(habit_id)
        return habit

    def _next_custom_id(self) -> str:
        while True:
            candidate = f"habit-{next(self._custom_ids)}"
            if candidate not in self._habits:
                return candidate
