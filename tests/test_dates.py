import datetime as dt

import pytest

from exercise_tracker_api.app.core.dates import format_date, parse_date


def test_format_date():
    assert format_date(dt.date(2023, 1, 15)) == "Sun Jan 15 2023"
    assert format_date(dt.date(2024, 1, 1)) == "Mon Jan 01 2024"


@pytest.mark.parametrize(
    "value",
    [
        "2023-01-15",
        "2023-01-15T23:59:00",
        "2023-01-15T10:00:00Z",
        "Sun Jan 15 2023",
        dt.date(2023, 1, 15),
        dt.datetime(2023, 1, 15, 6, 30),
    ],
)
def test_parse_date(value):
    assert parse_date(value) == dt.date(2023, 1, 15)


@pytest.mark.parametrize("value", ["", "yesterday", "2023-02-30", "Invalid Date", None, 20230115])
def test_parse_date_rejects(value):
    with pytest.raises(ValueError):
        parse_date(value)
