"""Date parsing and formatting shared by schemas and services."""

from datetime import date, datetime
from typing import Union

# "Sun Jan 15 2023": weekday, month, zero padded day, year.
DATE_FORMAT = "%a %b %d %Y"


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_date(value: Union[str, date, datetime]) -> date:
    """Parse a calendar date from user input or stored data.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings, ISO
    datetimes (the time of day is dropped) and the display format
    produced by :func:`format_date`.  Raises ``ValueError`` for anything
    else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date: {value!r}")
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date: {value!r}") from None
