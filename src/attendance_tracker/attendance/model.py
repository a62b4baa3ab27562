from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import DATE_KEY_FORMAT
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in/check-out session.

    A user may own several records for the same work_date; at most one of
    them is open (no check_out_time) at a time.
    """

    attendance_id: int
    user_id: str
    employee_id: str
    name: str
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    working_minutes: Optional[int] = None
    status: Optional[AttendanceStatus] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None

    @property
    def date_key(self) -> str:
        return self.work_date.strftime(DATE_KEY_FORMAT)
