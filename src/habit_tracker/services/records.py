"""Record store interface."""

from datetime import datetime
from typing import Protocol

from habit_tracker.domain.records import HabitRecord


class RecordStore(Protocol):
    """Persistence interface for daily habit records.

    Records are keyed by (date key, habit id); there is at most one record
    per pair and the last write wins.
    """

    def add_record(self, date_key: str, habit_id: str, record: HabitRecord) -> None:
        """Store a record, replacing any existing one for the pair."""

    def update_record(
        self,
        date_key: str,
        habit_id: str,
        metrics: dict[str, object],
        notes: str | None,
        timestamp: datetime,
    ) -> HabitRecord:
        """Shallow-merge metrics into the record, creating it if missing."""

    def delete_record(self, date_key: str, habit_id: str) -> bool:
        """Remove one habit's record for a date; return True if it existed."""

    def get_record(self, date_key: str, habit_id: str) -> HabitRecord | None:
        """Return the record for a date and habit, if present."""

    def records_on(self, date_key: str) -> dict[str, HabitRecord]:
        """Return every habit's record for a date."""

    def today_records(self, date_key: str) -> dict[str, HabitRecord]:
        """Return the records for the current date key."""

    def records_for_habit(
        self, habit_id: str, start_key: str, end_key: str
    ) -> dict[str, HabitRecord]:
        """Return a habit's records in an inclusive date range, by date key."""

    def clear(self) -> None:
        """Remove all records."""

    def count(self) -> int:
        """Return the number of stored records."""
