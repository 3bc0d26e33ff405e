"""Supabase-backed record store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from habit_tracker.domain.records import HabitRecord
from habit_tracker.services.records import RecordStore

_TABLE = "habit_records"


@dataclass
class SupabaseRecordStore(RecordStore):
    """Supabase implementation for daily habit records."""

    client: Client

    def add_record(self, date_key: str, habit_id: str, record: HabitRecord) -> None:
        """Upsert a record for the date and habit."""
        response = (
            self.client.table(_TABLE)
            .upsert(
                _to_row(date_key, habit_id, record),
                on_conflict="date_key,habit_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store habit record")

    def update_record(
        self,
        date_key: str,
        habit_id: str,
        metrics: dict[str, object],
        notes: str | None,
        timestamp: datetime,
    ) -> HabitRecord:
        """Merge metrics into the stored record, creating it if missing."""
        existing = self.get_record(date_key, habit_id)
        if notes is None and existing is not None:
            notes = existing.notes
        merged = HabitRecord(
            metrics={**(existing.metrics if existing else {}), **metrics},
            timestamp=timestamp,
            notes=notes,
        )
        self.add_record(date_key, habit_id, merged)
        return merged

    def delete_record(self, date_key: str, habit_id: str) -> bool:
        """Delete one habit's record for a date."""
        response = (
            self.client.table(_TABLE)
            .delete()
            .eq("date_key", date_key)
            .eq("habit_id", habit_id)
            .execute()
        )
        return bool(response.data)

    def get_record(self, date_key: str, habit_id: str) -> HabitRecord | None:
        """Return the record for a date and habit, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("date_key", date_key)
            .eq("habit_id", habit_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def records_on(self, date_key: str) -> dict[str, HabitRecord]:
        """Return every habit's record for a date."""
        response = (
            self.client.table(_TABLE).select("*").eq("date_key", date_key).execute()
        )
        return {str(row["habit_id"]): _parse_row(row) for row in response.data or []}

    def today_records(self, date_key: str) -> dict[str, HabitRecord]:
        """Return the records for the current date key."""
        return self.records_on(date_key)

    def records_for_habit(
        self, habit_id: str, start_key: str, end_key: str
    ) -> dict[str, HabitRecord]:
        """Return a habit's records in an inclusive date range."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("habit_id", habit_id)
            .gte("date_key", start_key)
            .lte("date_key", end_key)
            .order("date_key", desc=False)
            .execute()
        )
        return {str(row["date_key"]): _parse_row(row) for row in response.data or []}

    def clear(self) -> None:
        """Delete every stored record."""
        self.client.table(_TABLE).delete().neq("habit_id", "").execute()

    def count(self) -> int:
        """Return the number of stored records."""
        response = (
            self.client.table(_TABLE).select("habit_id", count="exact").execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])


def _to_row(date_key: str, habit_id: str, record: HabitRecord) -> dict[str, object]:
    return {
        "date_key": date_key,
        "habit_id": habit_id,
        "metrics": record.metrics,
        "notes": record.notes,
        "recorded_at": record.timestamp.isoformat(),
    }


def _parse_row(row: dict[str, object]) -> HabitRecord:
    recorded_raw = row.get("recorded_at")
    recorded_at = (
        datetime.fromisoformat(recorded_raw)
        if isinstance(recorded_raw, str) and recorded_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    metrics = row.get("metrics")
    notes = row.get("notes")
    return HabitRecord(
        metrics=dict(metrics) if isinstance(metrics, dict) else {},
        timestamp=recorded_at,
        notes=notes if isinstance(notes, str) else None,
    )
