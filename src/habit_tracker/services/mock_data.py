"""Sample records for demos and local development."""

import random
from datetime import UTC, date, datetime, time, timedelta

from habit_tracker.domain.habits import HabitType
from habit_tracker.domain.records import HabitRecord
from habit_tracker.services.records import RecordStore

_WORKOUT_TYPES = ("running", "cycling", "swimming", "gym")


def generate_mock_records(
    today: date, days: int = 30, seed: int | None = None
) -> dict[str, dict[str, HabitRecord]]:
    """Build `days` days of plausible records ending today."""
    rng = random.Random(seed)
    records: dict[str, dict[str, HabitRecord]] = {}
    for offset in range(days):
        day = today - timedelta(days=offset)
        timestamp = datetime.combine(day, time(hour=12), tzinfo=UTC)
        records[day.isoformat()] = {
            HabitType.EXERCISE: HabitRecord(
                metrics={
                    "duration": rng.randint(15, 104),
                    "calories": rng.randint(100, 499),
                    "exercises": rng.randint(1, 4),
                    "type": rng.choice(_WORKOUT_TYPES),
                    "intensity": rng.randint(1, 3),
                },
                timestamp=timestamp,
                notes="Great training session" if offset % 3 == 0 else None,
            ),
            HabitType.SLEEP: HabitRecord(
                metrics={
                    "duration": round(rng.uniform(6, 9), 1),
                    "quality": rng.randint(6, 9),
                    "bedtime": f"23:{rng.randint(0, 59):02d}",
                    "wakeupTime": f"0{rng.randint(6, 8)}:{rng.randint(0, 59):02d}",
                },
                timestamp=timestamp,
                notes="Woke up rested" if offset % 4 == 0 else None,
            ),
            HabitType.NUTRITION: HabitRecord(
                metrics={
                    "calories": rng.randint(1500, 2299),
                    "water": rng.randint(6, 9),
                    "meals": rng.randint(3, 5),
                    "protein": rng.randint(100, 179),
                },
                timestamp=timestamp,
                notes="More vegetables today" if offset % 5 == 0 else None,
            ),
        }
    return records


def seed_store(
    store: RecordStore, today: date, days: int = 30, seed: int | None = None
) -> int:
    """Write generated records into a store and return how many were added."""
    added = 0
    for date_key, habits in generate_mock_records(today, days, seed).items():
        for habit_id, record in habits.items():
            store.add_record(date_key, habit_id, record)
            added += 1
    return added
