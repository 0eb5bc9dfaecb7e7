from datetime import date, datetime, timezone
from typing import Any, Union

DateInput = Union[str, int, float, date, datetime]


def _to_datetime(value: DateInput) -> datetime:
    """Accept ISO strings (with a trailing Z), epoch milliseconds, dates and datetimes."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    raise ValueError(f"Unsupported date value: {value!r}")


def format_date_human(value: DateInput, locale: str = 'en-GB') -> str:
    """DD/MM/YYYY for en-GB (default) or MM/DD/YYYY for en-US."""
    parsed = _to_datetime(value)
    if locale == 'en-US':
        return parsed.strftime('%m/%d/%Y')
    return parsed.strftime('%d/%m/%Y')


def display_date(value: Any, locale: str = 'en-GB') -> str:
    """format_date_human for stored documents: blank or malformed values give ''."""
    if value in (None, ''):
        return ''
    try:
        return format_date_human(value, locale)
    except (ValueError, TypeError, OverflowError, OSError):
        return ''
