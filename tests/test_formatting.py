from datetime import date, datetime

from attendance_tracker.common.datetime_utils import month_bounds, month_key, parse_month_key, today_date_key
from attendance_tracker.common.formatting import format_clock_time, format_date_display, format_duration


def test_format_duration_zero_for_missing_or_non_positive():
    for value in (None, 0, -1, -125):
        assert format_duration(value) == "0h 0m"


def test_format_duration_hours_and_minutes():
    assert format_duration(125) == "2h 5m"
    assert format_duration(480) == "8h 0m"


def test_format_clock_time_placeholder_when_missing():
    assert format_clock_time(None) == "--:--"


def test_format_clock_time_twelve_hour():
    assert format_clock_time(datetime(2025, 3, 10, 9, 5)) == "09:05 AM"
    assert format_clock_time(datetime(2025, 3, 10, 13, 30)) == "01:30 PM"


def test_today_date_key_uses_local_date():
    assert today_date_key(datetime(2025, 3, 1, 23, 59)) == "2025-03-01"


def test_month_helpers():
    assert month_key(date(2025, 2, 14)) == "2025-02"
    assert parse_month_key("2024-02") == date(2024, 2, 1)
    assert month_bounds(date(2024, 2, 14)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert format_date_display(date(2025, 3, 7)) == "07/03/2025"
