from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import DATE_KEY_FORMAT, MONTH_KEY_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def parse_month_key(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, MONTH_KEY_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easily.
    """
    return datetime.now()


def today_date_key(now: datetime | None = None) -> str:
    return (now or now_local()).strftime(DATE_KEY_FORMAT)


def month_key(value: date) -> str:
    return value.strftime(MONTH_KEY_FORMAT)


def month_bounds(value: date) -> tuple[date, date]:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=1), value.replace(day=last_day)
