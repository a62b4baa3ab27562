from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import TIME_PLACEHOLDER


def format_clock_time(value: Optional[datetime]) -> str:
    """Render a timestamp as 12-hour clock time, e.g. ``09:05 AM``."""
    if value is None:
        return TIME_PLACEHOLDER
    return value.strftime("%I:%M %p")


def format_duration(minutes: Optional[int]) -> str:
    if not minutes or minutes <= 0:
        return "0h 0m"
    minutes = int(minutes)
    return f"{minutes // 60}h {minutes % 60}m"


def format_date_display(value: date) -> str:
    return value.strftime("%d/%m/%Y")
