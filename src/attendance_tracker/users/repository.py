from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import EmployeeProfile


class ProfileRepository(Protocol):
    """Repository interface for employee profiles.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_uid(self, uid: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

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
        """Raise ValidationError when employee_id is already taken."""

        raise NotImplementedError

    def count_profiles(self) -> int:
        raise NotImplementedError

    def list_profiles(self) -> Sequence[EmployeeProfile]:
        raise NotImplementedError
