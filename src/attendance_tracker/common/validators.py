from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from ..core.enums import AuthErrorCode
from ..core.exceptions import AuthError, ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: str) -> str:
    """Syntax-check an address and return it lowercased; no DNS lookup."""
    try:
        info = validate_email((value or "").strip(), check_deliverability=False)
    except EmailNotValidError as exc:
        raise AuthError(AuthErrorCode.INVALID_EMAIL) from exc
    return info.normalized.lower()


def require_password_strength(value: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise AuthError(AuthErrorCode.WEAK_PASSWORD)
    return value
