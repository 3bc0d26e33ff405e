"""Calendar helpers for date keys."""

from datetime import date, datetime, timedelta

_WEEKDAY_NAMES = {
    "es": ("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
}
DEFAULT_LOCALE = "es"


def to_date_key(value: date | datetime | str) -> str:
    """Return the YYYY-MM-DD key for a date, datetime or key string."""
    if isinstance(value, str):
        return parse_date_key(value).isoformat()
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value.isoformat()


def parse_date_key(value: str) -> date:
    """Parse a YYYY-MM-DD key, raising ValueError for anything else."""
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError as exc:
        raise ValueError(f"Invalid date key: {value!r}") from exc


def trailing_days(today: date, days: int) -> list[date]:
    """Return the last `days` days ending today, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def weekday_short_name(day: date, locale: str = DEFAULT_LOCALE) -> str:
    """Return the localized abbreviated weekday name."""
    language = locale.split("-")[0].split("_")[0].lower()
    names = _WEEKDAY_NAMES.get(language, _WEEKDAY_NAMES["en"])
    return names[day.weekday()]
