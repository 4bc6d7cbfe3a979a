"""Credential verification."""

from __future__ import annotations

import hmac
from typing import Protocol


class CredentialVerifier(Protocol):
    """Interface for checking a username/password pair."""

    def verify(self, username: str, password: str) -> bool:
        """Return True if the pair is accepted."""
        ...


class StaticCredentialVerifier:
    """Accepts exactly one configured username/password pair.

    If either value is not configured, every attempt is rejected.
    """

    def __init__(self, username: str | None, password: str | None) -> None:
        self._username = username
        self._password = password

    @property
    def configured(self) -> bool:
        return bool(self._username) and bool(self._password)

    def verify(self, username: str, password: str) -> bool:
        if not self._username or not self._password:
            return False
        # Both comparisons always run.
        user_ok = hmac.compare_digest(username.encode(), self._username.encode())
        password_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return user_ok and password_ok
