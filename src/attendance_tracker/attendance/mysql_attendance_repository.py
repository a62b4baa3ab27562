from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import SessionAlreadyOpen
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, user_id, employee_id, name, work_date,
    check_in_time, check_out_time, working_minutes, status
"""

_ORDER = "ORDER BY work_date DESC, check_in_time DESC"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    minutes = r.get("working_minutes")
    status = r.get("status")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=r["user_id"],
        employee_id=r["employee_id"],
        name=r["name"],
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        working_minutes=int(minutes) if minutes is not None else None,
        status=AttendanceStatus(status) if status else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_one(self, where: str, params: tuple) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE {where} {_ORDER} LIMIT 1", params)
            r = fetchone(cur)
            return _to_record(r) if r else None

    def _select_many(self, where: str, params: tuple, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        sql = f"SELECT {_COLUMNS} FROM attendance_records WHERE {where} {_ORDER}"
        if limit is not None:
            sql += " LIMIT %s"
            params = params + (int(limit),)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_record(r) for r in fetchall(cur)]

    def get_latest_for_user_and_date(self, user_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._select_one("user_id=%s AND work_date=%s", (user_id, work_date))

    def get_open_for_user_and_date(self, user_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._select_one("user_id=%s AND work_date=%s AND check_out_time IS NULL", (user_id, work_date))

    def create_checkin(
        self,
        *,
        user_id: str,
        employee_id: str,
        name: str,
        work_date: date,
        check_in_time: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO attendance_records(user_id, employee_id, name, work_date, check_in_time)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (user_id, employee_id, name, work_date, check_in_time),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc, "uq_attendance_open_session"):
                    raise SessionAlreadyOpen() from exc
                raise
            return int(cur.lastrowid)

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        working_minutes: int,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, working_minutes=%s, status=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, int(working_minutes), status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

    def get_recent_for_user(self, user_id: str, limit: int) -> Sequence[AttendanceRecord]:
        return self._select_many("user_id=%s", (user_id,), limit=limit)

    def list_for_user_between(self, user_id: str, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return self._select_many("user_id=%s AND work_date BETWEEN %s AND %s", (user_id, start_date, end_date))

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._select_many("work_date=%s", (work_date,))

    def list_all(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if start_date is not None:
            clauses.append("work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("work_date <= %s")
            params.append(end_date)

        return self._select_many(" AND ".join(clauses), tuple(params))
