"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from habit_tracker.adapters.memory_record_store import InMemoryRecordStore
from habit_tracker.adapters.supabase_record_store import SupabaseRecordStore
from habit_tracker.config import Settings, parse_storage_backend
from habit_tracker.services.habits import HabitCatalog
from habit_tracker.services.mock_data import seed_store
from habit_tracker.services.quick_actions import QuickActionService
from habit_tracker.services.records import RecordStore
from habit_tracker.services.tracker import HabitTrackerService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_store: RecordStore
    habit_catalog: HabitCatalog
    tracker_service: HabitTrackerService
    quick_action_service: QuickActionService


def build_record_store(settings: Settings) -> RecordStore:
    """Create the record store selected by settings."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires URL and service key")
        return SupabaseRecordStore(
            create_client(settings.supabase_url, settings.supabase_service_key)
        )
    return InMemoryRecordStore()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    record_store = build_record_store(resolved_settings)
    habit_catalog = HabitCatalog()
    tracker_service = HabitTrackerService(
        store=record_store,
        catalog=habit_catalog,
        timezone_name=resolved_settings.timezone,
        locale=resolved_settings.locale,
    )
    if resolved_settings.seed_mock_data:
        added = seed_store(
            record_store, tracker_service.today(), resolved_settings.mock_data_days
        )
        _logger.info("Seeded %s mock records", added)

    return AppContainer(
        settings=resolved_settings,
        record_store=record_store,
        habit_catalog=habit_catalog,
        tracker_service=tracker_service,
        quick_action_service=QuickActionService(tracker_service),
    )
