from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class EmployeeProfile:
    """Domain entity: employee profile keyed by the auth account uid.

    Note: Plain data object, no DB access code here.
    """

    uid: str
    employee_id: str
    name: str
    role: Role
    email: str
    position: str = ""
    notes: str = ""
    created_at: Optional[datetime] = None
