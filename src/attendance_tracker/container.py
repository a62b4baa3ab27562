from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_HISTORY_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .users.auth_provider import AuthProvider
from .users.mysql_auth_provider import MySQLAuthProvider
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.repository import ProfileRepository
from .users.service import AuthService, EmployeeService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    profiles_repo: ProfileRepository
    auth_provider: AuthProvider

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: ReportService


def wire(
    *,
    attendance_repo: AttendanceRepository,
    profiles_repo: ProfileRepository,
    auth_provider: AuthProvider,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> Container:
    return Container(
        attendance_repo=attendance_repo,
        profiles_repo=profiles_repo,
        auth_provider=auth_provider,
        auth_service=AuthService(auth_provider, profiles_repo),
        employee_service=EmployeeService(auth_provider, profiles_repo),
        attendance_service=AttendanceService(attendance_repo, history_limit=history_limit),
        report_service=ReportService(attendance_repo, profiles_repo),
    )


def build_container(*, db_config: dict, history_limit: int = DEFAULT_HISTORY_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        attendance_repo=MySQLAttendanceRepository(conn),
        profiles_repo=MySQLProfileRepository(conn),
        auth_provider=MySQLAuthProvider(conn),
        history_limit=history_limit,
    )
