from __future__ import annotations

from .enums import AuthErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or missing."""


class AuthError(DomainError):
    """Categorized failure reported by the auth provider."""

    MESSAGES = {
        AuthErrorCode.EMAIL_IN_USE: "Email already in use",
        AuthErrorCode.WEAK_PASSWORD: "Password should be at least 6 characters",
        AuthErrorCode.INVALID_EMAIL: "Invalid email address",
        AuthErrorCode.INVALID_CREDENTIALS: "Incorrect email or password.",
        AuthErrorCode.NOT_FOUND: "No account found with this email.",
    }

    def __init__(self, code: AuthErrorCode, message: str | None = None):
        self.code = code
        super().__init__(message or self.MESSAGES.get(code, "Authentication failed"))


class NoOpenSession(DomainError):
    """Check-out attempted while no session is open today."""

    def __init__(self, message: str = "No active check-in found. Please check in first."):
        super().__init__(message)


class SessionAlreadyOpen(DomainError):
    """Check-in attempted while a session is still open today."""

    def __init__(self, message: str = "You are already checked in. Please check out first."):
        super().__init__(message)


class StoreError(Exception):
    """Backing store failure (connection, query, driver)."""
