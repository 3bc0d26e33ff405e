"""Shared test fixtures."""

from collections.abc import Callable
from datetime import UTC, date, datetime

import pytest

from habit_tracker.adapters.memory_record_store import InMemoryRecordStore
from habit_tracker.config import Settings
from habit_tracker.containers import AppContainer
from habit_tracker.domain.habits import HabitConfig, HabitTargets
from habit_tracker.domain.records import HabitRecord
from habit_tracker.services.habits import HabitCatalog
from habit_tracker.services.quick_actions import QuickActionService
from habit_tracker.services.tracker import HabitTrackerService

# A Sunday, so the trailing week runs Monday 2024-01-01 .. Sunday 2024-01-07.
TODAY = date(2024, 1, 7)
NOW = datetime(2024, 1, 7, 12, 0, tzinfo=UTC)


def fixed_clock(now: datetime = NOW) -> Callable[[], datetime]:
    return lambda: now


def make_record(notes: str | None = None, **metrics: object) -> HabitRecord:
    return HabitRecord(metrics=dict(metrics), timestamp=NOW, notes=notes)


def make_custom_habit(habit_id: str, **daily: float) -> HabitConfig:
    return HabitConfig(
        id=habit_id,
        name=habit_id.title(),
        icon="star",
        color="#9E9E9E",
        targets=HabitTargets(daily=dict(daily)),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token")


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def habit_catalog() -> HabitCatalog:
    return HabitCatalog()


@pytest.fixture
def tracker(
    record_store: InMemoryRecordStore, habit_catalog: HabitCatalog
) -> HabitTrackerService:
    return HabitTrackerService(
        store=record_store, catalog=habit_catalog, clock=fixed_clock()
    )


@pytest.fixture
def container(
    settings: Settings,
    record_store: InMemoryRecordStore,
    habit_catalog: HabitCatalog,
    tracker: HabitTrackerService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        record_store=record_store,
        habit_catalog=habit_catalog,
        tracker_service=tracker,
        quick_action_service=QuickActionService(tracker),
    )
