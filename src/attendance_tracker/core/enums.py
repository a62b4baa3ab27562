from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Per-session classification, assigned at check-out."""

    PRESENT = "present"
    PARTIAL = "partial"


class DayStatus(str, Enum):
    """Per-day classification: is every session of the day closed?"""

    IN_PROGRESS = "In Progress"
    COMPLETE = "Complete"


class AuthErrorCode(str, Enum):
    EMAIL_IN_USE = "email-already-in-use"
    WEAK_PASSWORD = "weak-password"
    INVALID_EMAIL = "invalid-email"
    INVALID_CREDENTIALS = "invalid-credentials"
    NOT_FOUND = "user-not-found"
