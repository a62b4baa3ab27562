from __future__ import annotations

import pytest

from attendance_tracker.core.enums import AuthErrorCode, Role
from attendance_tracker.core.exceptions import AuthError, StoreError, ValidationError
from attendance_tracker.users.service import AuthService, EmployeeService


def _provision(svc, **overrides):
    fields = dict(employee_id="E001", name="Alice", email="alice@example.com", password="secret1", position="Dev")
    fields.update(overrides)
    return svc.provision(**fields)


def test_provision_creates_credential_and_profile(auth_provider, profiles_repo):
    svc = EmployeeService(auth_provider, profiles_repo)

    uid = _provision(svc)

    profile = profiles_repo.get_by_uid(uid)
    assert profile.employee_id == "E001"
    assert profile.role == Role.EMPLOYEE
    assert profile.position == "Dev"
    assert auth_provider.authenticate("alice@example.com", "secret1") == uid


def test_provision_validates_required_fields_before_any_io(auth_provider, profiles_repo):
    svc = EmployeeService(auth_provider, profiles_repo)

    with pytest.raises(ValidationError):
        _provision(svc, name="  ")

    assert auth_provider.accounts == {}


@pytest.mark.parametrize(
    "overrides, code",
    [
        ({"email": "not-an-email"}, AuthErrorCode.INVALID_EMAIL),
        ({"password": "123"}, AuthErrorCode.WEAK_PASSWORD),
    ],
)
def test_provision_reports_categorized_auth_errors(auth_provider, profiles_repo, overrides, code):
    svc = EmployeeService(auth_provider, profiles_repo)

    with pytest.raises(AuthError) as exc_info:
        _provision(svc, **overrides)

    assert exc_info.value.code == code


def test_provision_duplicate_email(auth_provider, profiles_repo):
    svc = EmployeeService(auth_provider, profiles_repo)
    _provision(svc)

    with pytest.raises(AuthError) as exc_info:
        _provision(svc, employee_id="E002")

    assert exc_info.value.code == AuthErrorCode.EMAIL_IN_USE
    assert str(exc_info.value) == "Email already in use"


def test_provision_removes_credential_when_profile_step_fails(auth_provider, profiles_repo):
    svc = EmployeeService(auth_provider, profiles_repo)
    profiles_repo.fail_with = StoreError("Database operation failed")

    with pytest.raises(StoreError):
        _provision(svc)

    assert auth_provider.accounts == {}
    assert profiles_repo.count_profiles() == 0


def test_provision_duplicate_employee_id_rolls_back_credential(auth_provider, profiles_repo):
    svc = EmployeeService(auth_provider, profiles_repo)
    _provision(svc)

    with pytest.raises(ValidationError):
        _provision(svc, email="other@example.com")

    assert list(auth_provider.accounts) == ["alice@example.com"]


def test_login_returns_session_user(auth_provider, profiles_repo):
    uid = _provision(EmployeeService(auth_provider, profiles_repo))

    user = AuthService(auth_provider, profiles_repo).login("Alice@Example.com", "secret1")

    assert user.uid == uid
    assert user.employee_id == "E001"
    assert user.role == Role.EMPLOYEE


def test_login_wrong_password(auth_provider, profiles_repo):
    _provision(EmployeeService(auth_provider, profiles_repo))

    with pytest.raises(AuthError) as exc_info:
        AuthService(auth_provider, profiles_repo).login("alice@example.com", "wrong-pw")

    assert exc_info.value.code == AuthErrorCode.INVALID_CREDENTIALS


def test_login_credential_without_profile_is_not_found(auth_provider, profiles_repo):
    auth_provider.create_account("ghost@example.com", "secret1")

    with pytest.raises(AuthError) as exc_info:
        AuthService(auth_provider, profiles_repo).login("ghost@example.com", "secret1")

    assert exc_info.value.code == AuthErrorCode.NOT_FOUND
