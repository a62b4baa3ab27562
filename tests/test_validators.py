import pytest

from attendance_tracker.common.validators import require_email, require_non_empty
from attendance_tracker.core.enums import AuthErrorCode
from attendance_tracker.core.exceptions import AuthError, ValidationError


def test_require_email_lowercases_valid_address():
    assert require_email("  Alice@Example.COM ") == "alice@example.com"


@pytest.mark.parametrize(
    "value",
    ["", "not-an-email", "a@b..c", "a@-b.c", "a@b.c.", "two@@example.com", "space in@example.com"],
)
def test_require_email_rejects_malformed_addresses(value):
    with pytest.raises(AuthError) as exc_info:
        require_email(value)

    assert exc_info.value.code == AuthErrorCode.INVALID_EMAIL
    assert str(exc_info.value) == "Invalid email address"


def test_require_non_empty_strips_and_rejects_blank():
    assert require_non_empty("  E001 ", "Employee ID") == "E001"

    with pytest.raises(ValidationError, match="Employee ID is required"):
        require_non_empty("   ", "Employee ID")
