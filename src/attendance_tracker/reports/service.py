from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_key, now_local, parse_month_key
from ..common.formatting import format_clock_time, format_date_display, format_duration
from ..users.repository import ProfileRepository
from .aggregation import (
    DailySnapshot,
    DateGroup,
    MonthlySummary,
    daily_snapshot,
    filter_groups,
    group_by_date_and_employee,
    monthly_summary,
)


class ReportService:
    """Dashboard statistics and the all-employee attendance table."""

    def __init__(self, attendance: AttendanceRepository, profiles: ProfileRepository):
        self._attendance = attendance
        self._profiles = profiles

    def admin_snapshot(self, *, today: Optional[date] = None) -> DailySnapshot:
        today = today or now_local().date()
        records = self._attendance.list_for_date(today)
        return daily_snapshot(records, self._profiles.count_profiles())

    def employee_month_summary(self, user_id: str, *, today: Optional[date] = None) -> MonthlySummary:
        today = today or now_local().date()
        first_day, _ = month_bounds(today)
        records = self._attendance.list_for_user_between(user_id, first_day, today)
        return monthly_summary(records, today)

    def all_attendance(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
        month: Optional[str] = None,
    ) -> list[DateGroup]:
        if month:
            month = month_key(parse_month_key(month))

        start = end = None
        if work_date is not None:
            start = end = work_date
        elif month:
            start, end = month_bounds(parse_month_key(month))

        records = self._attendance.list_all(start_date=start, end_date=end)
        groups = group_by_date_and_employee(records)
        return filter_groups(groups, employee_id=employee_id, work_date=work_date, month=month)


def groups_to_rows(groups: list[DateGroup]) -> list[dict]:
    """Flatten date groups into one display row per employee-day."""
    rows = []
    for g in groups:
        for e in g.employees:
            rows.append(
                {
                    "date": format_date_display(g.work_date),
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "check_ins": [format_clock_time(r.check_in_time) for r in e.records],
                    "check_outs": [format_clock_time(r.check_out_time) for r in e.records],
                    "total_minutes": e.summary.total_minutes,
                    "total_hours": format_duration(e.summary.total_minutes),
                    "status": e.summary.day_status.value,
                }
            )
    return rows


def snapshot_to_ui(s: DailySnapshot) -> dict:
    return {
        "total_employees": s.total_employees,
        "checked_in_today": s.checked_in_today,
        "total_hours_today": format_duration(s.total_minutes_today),
        "total_minutes_today": s.total_minutes_today,
        "present_today": s.present_today,
        "partial_today": s.partial_today,
        "absent_today": s.absent_today,
    }
