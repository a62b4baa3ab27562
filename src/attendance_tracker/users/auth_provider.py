from __future__ import annotations

from typing import Protocol


class AuthProvider(Protocol):
    """Credential store: email/password accounts with opaque uids.

    Failures are reported as AuthError with an AuthErrorCode.
    """

    def create_account(self, email: str, password: str) -> str:
        raise NotImplementedError

    def authenticate(self, email: str, password: str) -> str:
        raise NotImplementedError

    def delete_account(self, uid: str) -> bool:
        raise NotImplementedError
