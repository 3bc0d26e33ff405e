"""Tests for the in-memory record store."""

from datetime import UTC, datetime

from habit_tracker.adapters.memory_record_store import InMemoryRecordStore
from tests.conftest import make_record


def test_add_replaces_existing_record() -> None:
    store = InMemoryRecordStore()
    store.add_record("2024-01-01", "exercise", make_record(duration=30, calories=200))
    store.add_record("2024-01-01", "exercise", make_record(duration=45))

    record = store.get_record("2024-01-01", "exercise")

    assert record is not None
    assert record.metrics == {"duration": 45}


def test_update_merges_fields_and_refreshes_timestamp() -> None:
    store = InMemoryRecordStore()
    store.add_record("2024-01-01", "nutrition", make_record(notes="salad", water=3))
    later = datetime(2024, 1, 2, tzinfo=UTC)

    merged = store.update_record("2024-01-01", "nutrition", {"meals": 2}, None, later)

    assert merged.metrics == {"water": 3, "meals": 2}
    assert merged.timestamp == later
    assert merged.notes == "salad"


def test_update_creates_missing_record() -> None:
    store = InMemoryRecordStore()

    store.update_record(
        "2024-01-01", "nutrition", {"water": 1}, None, datetime.now(tz=UTC)
    )

    assert store.count() == 1


def test_delete_keeps_sibling_habits() -> None:
    store = InMemoryRecordStore()
    store.add_record("2024-01-01", "exercise", make_record(duration=30))
    store.add_record("2024-01-01", "sleep", make_record(duration=8, quality=7))

    assert store.delete_record("2024-01-01", "exercise")
    assert not store.delete_record("2024-01-01", "exercise")

    assert store.get_record("2024-01-01", "exercise") is None
    sleep = store.get_record("2024-01-01", "sleep")
    assert sleep is not None
    assert sleep.metrics == {"duration": 8, "quality": 7}


def test_snapshots_are_not_mutated_by_later_writes() -> None:
    store = InMemoryRecordStore()
    store.add_record("2024-01-01", "exercise", make_record(duration=30))
    before = store.snapshot()

    store.add_record("2024-01-01", "sleep", make_record(duration=8))
    store.delete_record("2024-01-01", "exercise")

    assert set(before.on("2024-01-01")) == {"exercise"}
    assert store.snapshot().version > before.version


def test_records_for_habit_is_inclusive_and_sorted() -> None:
    store = InMemoryRecordStore()
    for key in ("2024-01-05", "2024-01-01", "2024-01-03", "2023-12-31"):
        store.add_record(key, "exercise", make_record(duration=10))
    store.add_record("2024-01-02", "sleep", make_record(duration=8))

    records = store.records_for_habit("exercise", "2024-01-01", "2024-01-05")

    assert list(records) == ["2024-01-01", "2024-01-03", "2024-01-05"]


def test_today_records_follow_writes() -> None:
    store = InMemoryRecordStore()
    store.add_record("2024-01-07", "exercise", make_record(duration=30))

    first = store.today_records("2024-01-07")
    store.add_record("2024-01-07", "sleep", make_record(duration=8))
    second = store.today_records("2024-01-07")

    assert set(first) == {"exercise"}
    assert set(second) == {"exercise", "sleep"}
    assert store.today_records("2024-01-08") == {}


def test_clear_removes_everything() -> None:
    store = InMemoryRecordStore()
    store.add_record("2024-01-01", "exercise", make_record(duration=30))

    store.clear()

    assert store.count() == 0
    assert store.records_on("2024-01-01") == {}
