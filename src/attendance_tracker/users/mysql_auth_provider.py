from __future__ import annotations

import uuid

import mysql.connector
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_password_strength
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import AuthErrorCode
from ..core.exceptions import AuthError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .auth_provider import AuthProvider


class MySQLAuthProvider(AuthProvider):
    """Email/password accounts stored in ``auth_accounts`` with Werkzeug hashes."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_account(self, email: str, password: str) -> str:
        email = require_email(email)
        require_password_strength(password, MIN_PASSWORD_LENGTH)

        uid = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "INSERT INTO auth_accounts(uid, email, password_hash) VALUES(%s,%s,%s)",
                    (uid, email, generate_password_hash(password)),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc, "uq_auth_accounts_email"):
                    raise AuthError(AuthErrorCode.EMAIL_IN_USE) from exc
                raise
        return uid

    def authenticate(self, email: str, password: str) -> str:
        email = require_email(email)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uid, password_hash FROM auth_accounts WHERE email=%s", (email,))
            row = fetchone(cur)

        if not row:
            raise AuthError(AuthErrorCode.NOT_FOUND)

        try:
            ok = check_password_hash(row["password_hash"], password)
        except ValueError:
            # unknown hash method or corrupted value
            ok = False

        if not ok:
            raise AuthError(AuthErrorCode.INVALID_CREDENTIALS)
        return row["uid"]

    def delete_account(self, uid: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM auth_accounts WHERE uid=%s", (uid,))
            return cur.rowcount > 0
