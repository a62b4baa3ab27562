from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.formatting import format_clock_time, format_date_display, format_duration
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import NoOpenSession
from .derivation import classify_session, group_by_date, summarize_day, worked_minutes
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    action: str  # "check_in" | "check_out"
    attendance_id: int
    record: Optional[AttendanceRecord] = None


class AttendanceService:
    """Check-in/check-out use cases for a single employee."""

    def __init__(self, attendance: AttendanceRepository, *, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._attendance = attendance
        self._history_limit = int(history_limit)

    def find_open_or_latest_today(self, user_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        now = now or now_local()
        return self._attendance.get_latest_for_user_and_date(user_id, now.date())

    def open_session(self, user_id: str, employee_id: str, name: str, *, now: datetime | None = None) -> int:
        user_id = require_non_empty(user_id, "User")
        employee_id = require_non_empty(employee_id, "Employee ID")
        name = require_non_empty(name, "Name")
        now = now or now_local()

        attendance_id = self._attendance.create_checkin(
            user_id=user_id,
            employee_id=employee_id,
            name=name,
            work_date=now.date(),
            check_in_time=now,
        )
        logger.info("check-in user=%s employee=%s record=%s", user_id, employee_id, attendance_id)
        return attendance_id

    def close_session(self, user_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()

        record = self._attendance.get_open_for_user_and_date(user_id, now.date())
        if not record:
            raise NoOpenSession()

        minutes = worked_minutes(record.check_in_time, now)
        status = classify_session(minutes)

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            working_minutes=minutes,
            status=status,
        )
        if not updated:
            # closed concurrently between the read and the write
            raise NoOpenSession()

        logger.info("check-out user=%s record=%s minutes=%s status=%s", user_id, record.attendance_id, minutes, status.value)
        return dataclasses.replace(record, check_out_time=now, working_minutes=minutes, status=status)

    def toggle(self, user_id: str, employee_id: str, name: str, *, now: datetime | None = None) -> ToggleResult:
        """Close today's latest session if it is open, otherwise open a new one."""
        now = now or now_local()
        latest = self.find_open_or_latest_today(user_id, now=now)

        if latest and latest.is_open:
            closed = self.close_session(user_id, now=now)
            return ToggleResult(action="check_out", attendance_id=closed.attendance_id, record=closed)

        attendance_id = self.open_session(user_id, employee_id, name, now=now)
        return ToggleResult(action="check_in", attendance_id=attendance_id)

    def list_recent(self, user_id: str, limit: int | None = None) -> Sequence[AttendanceRecord]:
        limit = int(limit) if limit and int(limit) > 0 else self._history_limit
        return self._attendance.get_recent_for_user(user_id, limit)

    def history_days(self, user_id: str, *, limit: int | None = None) -> list[dict]:
        """Recent sessions grouped per day, formatted for display."""
        days = group_by_date(self.list_recent(user_id, limit))

        out = []
        for work_date in sorted(days, reverse=True):
            records = days[work_date]
            summary = summarize_day(records)
            out.append(
                {
                    "date": format_date_display(work_date),
                    "name": records[0].name,
                    "check_ins": [format_clock_time(r.check_in_time) for r in records],
                    "check_outs": [format_clock_time(r.check_out_time) for r in records],
                    "total_hours": format_duration(summary.total_minutes),
                    "status": summary.day_status.value,
                }
            )
        return out


def record_to_ui(r: AttendanceRecord) -> dict:
    return {
        "attendance_id": r.attendance_id,
        "date": r.date_key,
        "employee_id": r.employee_id,
        "name": r.name,
        "check_in": format_clock_time(r.check_in_time),
        "check_out": format_clock_time(r.check_out_time),
        "working_hours": format_duration(r.working_minutes),
        "status": r.status.value if r.status else None,
    }
