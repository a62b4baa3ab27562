"""Rules that turn check-in/check-out events into minutes and statuses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from ..core.constants import FULL_DAY_MINUTES
from ..core.enums import AttendanceStatus, DayStatus
from .model import AttendanceRecord


@dataclass(frozen=True)
class DaySummary:
    total_minutes: int
    has_open_session: bool
    day_status: DayStatus


def worked_minutes(check_in: datetime, check_out: datetime) -> int:
    """Whole minutes between the two instants, half a minute rounding up, never negative."""
    seconds = (check_out - check_in).total_seconds()
    return max(0, math.floor(seconds / 60 + 0.5))


def classify_session(minutes: int) -> AttendanceStatus:
    if minutes >= FULL_DAY_MINUTES:
        return AttendanceStatus.PRESENT
    return AttendanceStatus.PARTIAL


def summarize_day(records: Iterable[AttendanceRecord]) -> DaySummary:
    total = 0
    has_open = False
    for r in records:
        if r.is_open:
            has_open = True
        else:
            total += int(r.working_minutes or 0)

    return DaySummary(
        total_minutes=total,
        has_open_session=has_open,
        day_status=DayStatus.IN_PROGRESS if has_open else DayStatus.COMPLETE,
    )


def group_by_date(records: Iterable[AttendanceRecord]) -> dict[date, list[AttendanceRecord]]:
    """Bucket records per work_date, keeping their incoming order inside each bucket."""
    groups: dict[date, list[AttendanceRecord]] = {}
    for r in records:
        groups.setdefault(r.work_date, []).append(r)
    return groups
