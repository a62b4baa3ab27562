from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import EmployeeProfile
from .repository import ProfileRepository


def _to_profile(row: Dict[str, Any]) -> EmployeeProfile:
    return EmployeeProfile(
        uid=row["uid"],
        employee_id=row["employee_id"],
        name=row["name"],
        role=Role(row["role"]),
        email=row["email"],
        position=row.get("position") or "",
        notes=row.get("notes") or "",
        created_at=row.get("created_at"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_uid(self, uid: str) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT uid, employee_id, name, role, email, position, notes, created_at
                FROM employee_profiles
                WHERE uid=%s
                """,
                (uid,),
            )
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def create_profile(
        self,
        *,
        uid: str,
        employee_id: str,
        name: str,
        role: Role,
        email: str,
        position: str = "",
        notes: str = "",
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO employee_profiles(uid, employee_id, name, role, email, position, notes)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (uid, employee_id, name, role.value, email, position or "", notes or ""),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc, "uq_employee_profiles_employee_id"):
                    raise ValidationError(f"Employee ID {employee_id} already exists") from exc
                raise

    def count_profiles(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employee_profiles")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def list_profiles(self) -> Sequence[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT uid, employee_id, name, role, email, position, notes, created_at
                FROM employee_profiles
                ORDER BY employee_id ASC
                """
            )
            return [_to_profile(r) for r in fetchall(cur)]
