from __future__ import annotations

import dataclasses
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.common.validators import require_email, require_password_strength
from attendance_tracker.core.constants import MIN_PASSWORD_LENGTH
from attendance_tracker.core.enums import AttendanceStatus, AuthErrorCode
from attendance_tracker.core.exceptions import AuthError, SessionAlreadyOpen, ValidationError
from attendance_tracker.users.model import EmployeeProfile


def _desc(items):
    return sorted(items, key=lambda r: (r.work_date, r.check_in_time, r.attendance_id), reverse=True)


class InMemoryAttendance:
    def __init__(self):
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.updates = 0

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self._rows[record.attendance_id] = record
        self._id = max(self._id, record.attendance_id)
        return record

    def get(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._rows.get(attendance_id)

    def get_latest_for_user_and_date(self, user_id, work_date):
        items = _desc(r for r in self._rows.values() if r.user_id == user_id and r.work_date == work_date)
        return items[0] if items else None

    def get_open_for_user_and_date(self, user_id, work_date):
        items = _desc(
            r for r in self._rows.values() if r.user_id == user_id and r.work_date == work_date and r.is_open
        )
        return items[0] if items else None

    def create_checkin(self, *, user_id, employee_id, name, work_date, check_in_time) -> int:
        if self.get_open_for_user_and_date(user_id, work_date):
            raise SessionAlreadyOpen()
        self._id += 1
        self._rows[self._id] = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            employee_id=employee_id,
            name=name,
            work_date=work_date,
            check_in_time=check_in_time,
        )
        return self._id

    def update_checkout(self, *, attendance_id, check_out_time, working_minutes, status) -> bool:
        rec = self._rows.get(attendance_id)
        if not rec or not rec.is_open:
            return False
        self._rows[attendance_id] = dataclasses.replace(
            rec, check_out_time=check_out_time, working_minutes=working_minutes, status=status
        )
        self.updates += 1
        return True

    def get_recent_for_user(self, user_id, limit):
        return _desc(r for r in self._rows.values() if r.user_id == user_id)[:limit]

    def list_for_user_between(self, user_id, start_date, end_date):
        return _desc(r for r in self._rows.values() if r.user_id == user_id and start_date <= r.work_date <= end_date)

    def list_for_date(self, work_date):
        return _desc(r for r in self._rows.values() if r.work_date == work_date)

    def list_all(self, *, start_date=None, end_date=None):
        return _desc(
            r
            for r in self._rows.values()
            if (start_date is None or r.work_date >= start_date) and (end_date is None or r.work_date <= end_date)
        )


class InMemoryProfiles:
    def __init__(self):
        self.profiles: dict[str, EmployeeProfile] = {}
        self.fail_with: Optional[Exception] = None

    def get_by_uid(self, uid):
        return self.profiles.get(uid)

    def create_profile(self, *, uid, employee_id, name, role, email, position="", notes=""):
        if self.fail_with is not None:
            raise self.fail_with
        if any(p.employee_id == employee_id for p in self.profiles.values()):
            raise ValidationError(f"Employee ID {employee_id} already exists")
        self.profiles[uid] = EmployeeProfile(
            uid=uid, employee_id=employee_id, name=name, role=role, email=email, position=position, notes=notes
        )

    def count_profiles(self):
        return len(self.profiles)

    def list_profiles(self):
        return sorted(self.profiles.values(), key=lambda p: p.employee_id)


class InMemoryAuth:
    def __init__(self):
        self.accounts: dict[str, tuple[str, str]] = {}
        self._id = 0

    def create_account(self, email, password):
        email = require_email(email)
        require_password_strength(password, MIN_PASSWORD_LENGTH)
        if email in self.accounts:
            raise AuthError(AuthErrorCode.EMAIL_IN_USE)
        self._id += 1
        uid = f"uid-{self._id}"
        self.accounts[email] = (uid, password)
        return uid

    def authenticate(self, email, password):
        email = require_email(email)
        if email not in self.accounts:
            raise AuthError(AuthErrorCode.NOT_FOUND)
        uid, stored = self.accounts[email]
        if stored != password:
            raise AuthError(AuthErrorCode.INVALID_CREDENTIALS)
        return uid

    def delete_account(self, uid):
        for email, (account_uid, _) in list(self.accounts.items()):
            if account_uid == uid:
                del self.accounts[email]
                return True
        return False


def make_record(
    attendance_id: int,
    *,
    user_id: str = "u1",
    employee_id: str = "E001",
    name: str = "Alice",
    work_date: date = date(2025, 3, 10),
    check_in: datetime | None = None,
    minutes: int | None = None,
) -> AttendanceRecord:
    """Build a record; ``minutes=None`` leaves the session open."""
    check_in = check_in or datetime.combine(work_date, datetime.min.time()).replace(hour=9)
    if minutes is None:
        return AttendanceRecord(attendance_id, user_id, employee_id, name, work_date, check_in)
    return AttendanceRecord(
        attendance_id,
        user_id,
        employee_id,
        name,
        work_date,
        check_in,
        check_out_time=check_in + timedelta(minutes=minutes),
        working_minutes=minutes,
        status=AttendanceStatus.PRESENT if minutes >= 480 else AttendanceStatus.PARTIAL,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 8, 30, 0)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def profiles_repo() -> InMemoryProfiles:
    return InMemoryProfiles()


@pytest.fixture
def auth_provider() -> InMemoryAuth:
    return InMemoryAuth()


@pytest.fixture
def record_factory():
    return make_record
