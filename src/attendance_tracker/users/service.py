from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.enums import AuthErrorCode, Role
from ..core.exceptions import AuthError, StoreError, ValidationError
from .auth_provider import AuthProvider
from .model import EmployeeProfile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    uid: str
    employee_id: str
    name: str
    role: Role
    email: str


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, auth: AuthProvider, profiles: ProfileRepository):
        self._auth = auth
        self._profiles = profiles

    def login(self, email: str, password: str) -> SessionUser:
        require_non_empty(email, "Email")
        if not password:
            raise ValidationError("Password is required")

        uid = self._auth.authenticate(email, password)
        profile = self._profiles.get_by_uid(uid)
        if not profile:
            # credential left without a profile by a failed provisioning
            raise AuthError(AuthErrorCode.NOT_FOUND)

        return SessionUser(
            uid=profile.uid,
            employee_id=profile.employee_id,
            name=profile.name,
            role=profile.role,
            email=profile.email,
        )


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, auth: AuthProvider, profiles: ProfileRepository):
        self._auth = auth
        self._profiles = profiles

    def provision(
        self,
        *,
        employee_id: str,
        name: str,
        email: str,
        password: str,
        position: str = "",
        notes: str = "",
        role: Role = Role.EMPLOYEE,
    ) -> str:
        """Create the login credential, then the profile, as one unit.

        If the profile cannot be written the credential is deleted again and
        the original error propagates.
        """

        employee_id = require_non_empty(employee_id, "Employee ID")
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        if not password:
            raise ValidationError("Password is required")

        uid = self._auth.create_account(email, password)
        try:
            self._profiles.create_profile(
                uid=uid,
                employee_id=employee_id,
                name=name,
                role=role,
                email=email.lower(),
                position=(position or "").strip(),
                notes=(notes or "").strip(),
            )
        except Exception:
            logger.warning("profile creation failed for uid=%s, removing credential", uid)
            try:
                self._auth.delete_account(uid)
            except StoreError:
                logger.exception("orphaned credential uid=%s could not be removed", uid)
            raise

        logger.info("provisioned employee=%s uid=%s role=%s", employee_id, uid, role.value)
        return uid

    def list_employees(self) -> Sequence[EmployeeProfile]:
        return self._profiles.list_profiles()
