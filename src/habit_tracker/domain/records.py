"""Domain models for daily habit records."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HabitRecord:
    """One day's captured metrics for a single habit."""

    metrics: dict[str, object]
    timestamp: datetime
    notes: str | None = None

    def flatten(self, date_key: str) -> dict[str, object]:
        """Return the record as a flat mapping tagged with its date key."""
        payload: dict[str, object] = {**self.metrics, "date": date_key}
        if self.notes is not None:
            payload["notes"] = self.notes
        payload["timestamp"] = self.timestamp.isoformat()
        return payload


@dataclass(frozen=True)
class CompletionStats:
    """How many days in a window have a record."""

    total_days: int
    completed_days: int
    completion_rate: int
    records: list[dict[str, object]] = field(default_factory=list)
