"""In-memory record store with copy-on-write snapshots."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime

from habit_tracker.domain.records import HabitRecord
from habit_tracker.services.records import RecordStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSnapshot:
    """Immutable view of the store at one version.

    Writers never mutate a published snapshot's mappings; they build new
    ones and swap the snapshot reference.
    """

    version: int
    records: dict[str, dict[str, HabitRecord]] = field(default_factory=dict)

    def get(self, date_key: str, habit_id: str) -> HabitRecord | None:
        return self.records.get(date_key, {}).get(habit_id)

    def on(self, date_key: str) -> dict[str, HabitRecord]:
        return dict(self.records.get(date_key, {}))


class InMemoryRecordStore(RecordStore):
    """Volatile store for a single application session."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot = RecordSnapshot(version=0)
        self._today_cache: tuple[int, str, dict[str, HabitRecord]] | None = None

    def snapshot(self) -> RecordSnapshot:
        """Return the current published snapshot."""
        return self._snapshot

    def add_record(self, date_key: str, habit_id: str, record: HabitRecord) -> None:
        """Store a record, replacing any existing one for the pair."""
        with self._lock:
            self._publish(date_key, {**self._snapshot.on(date_key), habit_id: record})
        _logger.debug("Stored %s record for %s", habit_id, date_key)

    def update_record(
        self,
        date_key: str,
        habit_id: str,
        metrics: dict[str, object],
        notes: str | None,
        timestamp: datetime,
    ) -> HabitRecord:
        """Shallow-merge metrics into the record, creating it if missing."""
        with self._lock:
            existing = self._snapshot.get(date_key, habit_id)
            if notes is None and existing is not None:
                notes = existing.notes
            merged = HabitRecord(
                metrics={**(existing.metrics if existing else {}), **metrics},
                timestamp=timestamp,
                notes=notes,
            )
            self._publish(date_key, {**self._snapshot.on(date_key), habit_id: merged})
        _logger.debug("Merged %s record for %s", habit_id, date_key)
        return merged

    def delete_record(self, date_key: str, habit_id: str) -> bool:
        """Remove one habit's record for a date; return True if it existed."""
        with self._lock:
            remaining = self._snapshot.on(date_key)
            if remaining.pop(habit_id, None) is None:
                return False
            self._publish(date_key, remaining)
        _logger.debug("Deleted %s record for %s", habit_id, date_key)
        return True

    def get_record(self, date_key: str, habit_id: str) -> HabitRecord | None:
        """Return the record for a date and habit, if present."""
        return self._snapshot.get(date_key, habit_id)

    def records_on(self, date_key: str) -> dict[str, HabitRecord]:
        """Return every habit's record for a date."""
        return self._snapshot.on(date_key)

    def records_for_habit(
        self, habit_id: str, start_key: str, end_key: str
    ) -> dict[str, HabitRecord]:
        """Return a habit's records in an inclusive date range, by date key."""
        snapshot = self._snapshot
        return {
            date_key: day[habit_id]
            for date_key, day in sorted(snapshot.records.items())
            if start_key <= date_key <= end_key and habit_id in day
        }

    def today_records(self, date_key: str) -> dict[str, HabitRecord]:
        """Return the records for today's key, memoized per snapshot."""
        snapshot = self._snapshot
        cached = self._today_cache
        if cached and cached[0] == snapshot.version and cached[1] == date_key:
            return dict(cached[2])
        today = snapshot.on(date_key)
        self._today_cache = (snapshot.version, date_key, today)
        return dict(today)

    def clear(self) -> None:
        """Remove all records."""
        with self._lock:
            self._snapshot = RecordSnapshot(version=self._snapshot.version + 1)
        _logger.info("Cleared all records")

    def count(self) -> int:
        """Return the number of stored records."""
        return sum(len(day) for day in self._snapshot.records.values())

    def _publish(self, date_key: str, day: dict[str, HabitRecord]) -> None:
        records = dict(self._snapshot.records)
        if day:
            records[date_key] = day
        else:
            records.pop(date_key, None)
        self._snapshot = RecordSnapshot(
            version=self._snapshot.version + 1, records=records
        )
