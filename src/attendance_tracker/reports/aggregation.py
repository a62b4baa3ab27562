"""Folds attendance records into dashboard statistics and grouped tables.

Everything here is a pure function of its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.derivation import DaySummary, group_by_date, summarize_day
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_key
from ..core.constants import FULL_DAY_MINUTES
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DailySnapshot:
    total_employees: int
    checked_in_today: int
    total_minutes_today: int
    present_today: int
    partial_today: int
    absent_today: int


@dataclass(frozen=True)
class MonthlySummary:
    present_days: int
    attended_days: int
    leaves_this_month: int


@dataclass(frozen=True)
class EmployeeDayGroup:
    employee_id: str
    name: str
    records: tuple[AttendanceRecord, ...]
    summary: DaySummary


@dataclass(frozen=True)
class DateGroup:
    work_date: date
    employees: tuple[EmployeeDayGroup, ...]


def daily_snapshot(records: Iterable[AttendanceRecord], total_employees: int) -> DailySnapshot:
    users: set[str] = set()
    total_minutes = 0
    present = 0
    partial = 0

    for r in records:
        users.add(r.user_id)
        total_minutes += int(r.working_minutes or 0)
        if r.is_open:
            continue
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.PARTIAL:
            partial += 1

    return DailySnapshot(
        total_employees=int(total_employees),
        checked_in_today=len(users),
        total_minutes_today=total_minutes,
        present_today=present,
        partial_today=partial,
        # every checked-in user should have a profile; clamp if the data disagrees
        absent_today=max(0, int(total_employees) - len(users)),
    )


def monthly_summary(records: Iterable[AttendanceRecord], today: date) -> MonthlySummary:
    """Present days and inferred leave days for the month containing ``today``.

    A day counts as present once its closed sessions add up to a full day.
    Any elapsed day of the month without a record is a leave day; weekends
    and holidays are not excluded.
    """

    in_month = [
        r for r in records
        if r.work_date.year == today.year and r.work_date.month == today.month and r.work_date <= today
    ]
    days = group_by_date(in_month)
    present_days = sum(1 for day in days.values() if summarize_day(day).total_minutes >= FULL_DAY_MINUTES)

    return MonthlySummary(
        present_days=present_days,
        attended_days=len(days),
        leaves_this_month=max(0, today.day - len(days)),
    )


def group_by_date_and_employee(records: Iterable[AttendanceRecord]) -> list[DateGroup]:
    """Group by work_date, then employee_id.

    Records keep their incoming order inside a group, so feeding records
    sorted by check-in descending yields groups in that same order.
    """

    out: list[DateGroup] = []
    for work_date, day_records in group_by_date(records).items():
        by_employee: dict[str, list[AttendanceRecord]] = {}
        for r in day_records:
            by_employee.setdefault(r.employee_id, []).append(r)

        employees = tuple(
            EmployeeDayGroup(
                employee_id=employee_id,
                name=items[0].name,
                records=tuple(items),
                summary=summarize_day(items),
            )
            for employee_id, items in by_employee.items()
        )
        out.append(DateGroup(work_date=work_date, employees=employees))

    out.sort(key=lambda g: g.work_date.isoformat(), reverse=True)
    return out


def filter_groups(
    groups: Sequence[DateGroup],
    *,
    employee_id: Optional[str] = None,
    work_date: Optional[date] = None,
    month: Optional[str] = None,
) -> list[DateGroup]:
    """Apply the admin table filters; all given filters must match.

    ``employee_id`` is a case-insensitive substring, ``work_date`` an exact
    day and ``month`` an exact ``YYYY-MM``. Date groups left without any
    employee are dropped.
    """

    needle = (employee_id or "").strip().lower()
    out: list[DateGroup] = []

    for g in groups:
        if work_date is not None and g.work_date != work_date:
            continue
        if month and month_key(g.work_date) != month:
            continue

        employees = g.employees
        if needle:
            employees = tuple(e for e in employees if needle in e.employee_id.lower())
            if not employees:
                continue

        out.append(DateGroup(work_date=g.work_date, employees=employees))

    out.sort(key=lambda g: g.work_date.isoformat(), reverse=True)
    return out
