"""Habit tracking application service."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from habit_tracker.domain.dates import DEFAULT_LOCALE, to_date_key
from habit_tracker.domain.progress import DailyProgress, WeeklyView
from habit_tracker.domain.records import CompletionStats, HabitRecord
from habit_tracker.domain.validation import ValidationResult
from habit_tracker.services.habits import HabitCatalog
from habit_tracker.services.progress import compute_daily_progress, round_half_up
from habit_tracker.services.records import RecordStore
from habit_tracker.services.validation import unknown_habit, validate
from habit_tracker.services.weekly import WINDOW_DAYS, compute_weekly_view

MONTH_DAYS = 30

_logger = logging.getLogger(__name__)

DateInput = date | datetime | str | None
_RESERVED_KEYS = frozenset({"date", "notes", "timestamp"})


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class HabitTrackerService:
    """Validates submissions, writes records and derives progress views."""

    store: RecordStore
    catalog: HabitCatalog
    timezone_name: str = "UTC"
    locale: str = DEFAULT_LOCALE
    clock: Callable[[], datetime] = field(default=_utc_now)

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return self.clock().astimezone(ZoneInfo(self.timezone_name)).date()

    def submit_record(
        self, habit_id: str, fields: Mapping[str, object], day: DateInput = None
    ) -> ValidationResult:
        """Validate fields and, if valid, store them as the day's record."""
        config = self.catalog.get_habit(habit_id)
        if config is None:
            return unknown_habit(habit_id, self.locale)
        result = validate(habit_id, fields, config, self.locale)
        if not result.is_valid:
            return result
        date_key = self._date_key(day)
        metrics, notes = _split_notes(result.data)
        record = HabitRecord(metrics=metrics, timestamp=self.clock(), notes=notes)
        self.store.add_record(date_key, habit_id, record)
        _logger.info("Recorded %s for %s", habit_id, date_key)
        return result

    def update_record(
        self, habit_id: str, fields: Mapping[str, object], day: DateInput = None
    ) -> ValidationResult:
        """Merge fields into the day's record after validating the result."""
        config = self.catalog.get_habit(habit_id)
        if config is None:
            return unknown_habit(habit_id, self.locale)
        date_key = self._date_key(day)
        existing = self.store.get_record(date_key, habit_id)
        merged: dict[str, object] = dict(existing.metrics) if existing else {}
        if existing and existing.notes is not None:
            merged["notes"] = existing.notes
        merged.update(fields)
        result = validate(habit_id, merged, config, self.locale)
        if not result.is_valid:
            return result
        changes = {key: result.data[key] for key in fields if key in result.data}
        metrics, notes = _split_notes(changes)
        self.store.update_record(date_key, habit_id, metrics, notes, self.clock())
        _logger.info("Updated %s for %s", habit_id, date_key)
        return result

    def delete_record(self, habit_id: str, day: DateInput = None) -> bool:
        """Delete the day's record for one habit."""
        date_key = self._date_key(day)
        deleted = self.store.delete_record(date_key, habit_id)
        if deleted:
            _logger.info("Deleted %s for %s", habit_id, date_key)
        return deleted

    def get_record(self, habit_id: str, day: DateInput = None) -> HabitRecord | None:
        """Return the day's record for a habit, if any."""
        return self.store.get_record(self._date_key(day), habit_id)

    def today_records(self) -> dict[str, HabitRecord]:
        """Return today's records keyed by habit id."""
        return self.store.today_records(self.today().isoformat())

    def get_daily_progress(
        self, habit_id: str, day: DateInput = None
    ) -> DailyProgress:
        """Return progress against daily targets for today or a given date."""
        record = self.store.get_record(self._date_key(day), habit_id)
        return compute_daily_progress(
            habit_id, record, self.catalog.get_habit(habit_id)
        )

    def get_weekly_view(
        self, habit_id: str, today: date | None = None
    ) -> WeeklyView | None:
        """Return the seven-day summary ending today, or None if unconfigured."""
        config = self.catalog.get_habit(habit_id)
        if config is None:
            return None
        end = today or self.today()
        start = end - timedelta(days=WINDOW_DAYS - 1)
        records = self.store.records_for_habit(
            habit_id, start.isoformat(), end.isoformat()
        )
        return compute_weekly_view(habit_id, records, config, end, self.locale)

    def get_records_in_range(
        self, habit_id: str, start: DateInput, end: DateInput
    ) -> list[dict[str, object]]:
        """Return a habit's records between two dates inclusive, oldest first."""
        start_key = self._date_key(start)
        end_key = self._date_key(end)
        if start_key > end_key:
            return []
        records = self.store.records_for_habit(habit_id, start_key, end_key)
        return [
            record.flatten(date_key) for date_key, record in sorted(records.items())
        ]

    def get_recent_records(
        self, habit_id: str, days: int = WINDOW_DAYS
    ) -> list[dict[str, object]]:
        """Return records for the trailing `days` days including today."""
        end = self.today()
        start = end - timedelta(days=max(days, 1) - 1)
        return self.get_records_in_range(habit_id, start, end)

    def get_monthly_records(self, habit_id: str) -> list[dict[str, object]]:
        """Return records for the trailing thirty days."""
        return self.get_recent_records(habit_id, MONTH_DAYS)

    def get_completion_stats(
        self, habit_id: str, days: int = WINDOW_DAYS
    ) -> CompletionStats:
        """Return how many of the trailing days have a record."""
        total_days = max(days, 1)
        records = self.get_recent_records(habit_id, total_days)
        return CompletionStats(
            total_days=total_days,
            completed_days=len(records),
            completion_rate=round_half_up(len(records) / total_days * 100),
            records=records,
        )

    def _date_key(self, day: DateInput) -> str:
        if day is None:
            return self.today().isoformat()
        return to_date_key(day)


def _split_notes(data: Mapping[str, object]) -> tuple[dict[str, object], str | None]:
    metrics = {
        key: value for key, value in data.items() if key not in _RESERVED_KEYS
    }
    notes = data.get("notes")
    return metrics, notes if isinstance(notes, str) else None
