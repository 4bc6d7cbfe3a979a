"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

import logging
from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from roster.auth import CredentialVerifier, Session, SessionGuard
from roster.roster_store import RosterStore
from roster.storage import DEFAULT_STORAGE_KEY, KeyValueStudentStorage, SqliteKeyValueBackend

logger = logging.getLogger(__name__)

# Global RosterStore instance and the backend it persists to (initialized on app startup)
_roster_store: RosterStore | None = None
_backend: SqliteKeyValueBackend | None = None


def init_roster_store(
    db_path: str = "roster.db", storage_key: str = DEFAULT_STORAGE_KEY
) -> RosterStore:
    """Initialize the global RosterStore instance."""
    global _roster_store, _backend  # noqa: PLW0603
    backend = SqliteKeyValueBackend(db_path)
    try:
        store = RosterStore(KeyValueStudentStorage(backend, key=storage_key))
    except Exception:
        backend.close()
        raise
    _backend = backend
    _roster_store = store
    return _roster_store


def close_roster_store() -> None:
    """Close the global RosterStore instance."""
    global _roster_store, _backend  # noqa: PLW0603
    if _backend is not None:
        _backend.close()
    _backend = None
    _roster_store = None


def get_roster_store() -> Generator[RosterStore, None, None]:
    """Dependency that provides the RosterStore instance."""
    if _roster_store is None:
        raise RuntimeError("RosterStore not initialized. Call init_roster_store() first.")
    yield _roster_store


# Type alias for dependency injection
RosterStoreDep = Annotated[RosterStore, Depends(get_roster_store)]

# Global SessionGuard instance (initialized on app startup)
_session_guard: SessionGuard | None = None


def init_session_guard(verifier: CredentialVerifier) -> SessionGuard:
    """Initialize the global SessionGuard. Always starts logged out."""
    global _session_guard  # noqa: PLW0603
    _session_guard = SessionGuard(verifier)
    return _session_guard


def close_session_guard() -> None:
    """Log out and drop the global SessionGuard."""
    global _session_guard  # noqa: PLW0603
    if _session_guard is not None:
        _session_guard.logout()
    _session_guard = None


def get_session_guard() -> Generator[SessionGuard, None, None]:
    """Dependency that provides the SessionGuard instance."""
    if _session_guard is None:
        raise RuntimeError("SessionGuard not initialized. Call init_session_guard() first.")
    yield _session_guard


# Type alias for dependency injection
SessionGuardDep = Annotated[SessionGuard, Depends(get_session_guard)]


def require_session(guard: SessionGuardDep) -> Session:
    """Dependency for protected routes.

    Raises:
        NotAuthenticatedError: If nobody is logged in.
    """
    return guard.require_session()
