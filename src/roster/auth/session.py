"""Session guard - login state for the single local user."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from roster.auth.credentials import CredentialVerifier
from roster.auth.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """An authenticated login. Exists from login until logout."""

    username: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class SessionGuard:
    """Holds the current Session, if any.

    Sessions live in process memory only; a new guard always starts logged out.
    """

    def __init__(self, verifier: CredentialVerifier) -> None:
        self._verifier = verifier
        self._session: Session | None = None

    @property
    def session(self) -> Session | None:
        """The current session, or None when logged out."""
        return self._session

    def login(self, username: str, password: str) -> bool:
        """Try to log in.

        On success a new Session replaces any current one. On failure the
        current state is left as it was.

        Returns:
            True if the credentials were accepted.
        """
        if not self._verifier.verify(username, password):
            logger.warning("Failed login attempt for user %s", username)
            return False
        self._session = Session(username=username)
        logger.info("User %s logged in", username)
        return True

    def logout(self) -> None:
        """End the current session. Safe to call when logged out."""
        if self._session is not None:
            logger.info("User %s logged out", self._session.username)
        self._session = None

    def is_authenticated(self) -> bool:
        return self._session is not None

    def require_session(self) -> Session:
        """Return the current session.

        Raises:
            NotAuthenticatedError: If no user is logged in.
        """
        if self._session is None:
            raise NotAuthenticatedError("Login required")
        return self._session
