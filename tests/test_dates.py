"""Tests for date helpers."""

from datetime import UTC, date, datetime

import pytest

from habit_tracker.domain.dates import (
    to_date_key,
    trailing_days,
    weekday_short_name,
)


def test_to_date_key_accepts_several_inputs() -> None:
    assert to_date_key(date(2024, 3, 9)) == "2024-03-09"
    assert to_date_key(datetime(2024, 3, 9, 23, 59, tzinfo=UTC)) == "2024-03-09"
    assert to_date_key("2024-03-09T10:00:00") == "2024-03-09"


def test_to_date_key_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid date key"):
        to_date_key("yesterday")


def test_trailing_days_oldest_first() -> None:
    days = trailing_days(date(2024, 3, 1), 3)

    assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_unknown_locale_falls_back_to_english() -> None:
    assert weekday_short_name(date(2024, 1, 7), "fr") == "Sun"
