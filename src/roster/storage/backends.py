"""Key/value backends the roster is persisted into."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from roster.storage.database import Database
from roster.storage.exceptions import StorageError
from roster.storage.models import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """Interface for a string key/value store."""

    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""
        ...

    def close(self) -> None:
        """Release any held resources."""
        ...


class SqliteKeyValueBackend:
    """Key/value backend on a single SQLite table.

    Every call runs in its own session and commits before returning.
    """

    def __init__(self, db_path: str = "roster.db") -> None:
        """Open (and create if needed) the database.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self._db = Database(db_path)
        try:
            self._db.create_tables()
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot open key/value store at '{db_path}': {e}") from e

    def get_item(self, key: str) -> str | None:
        session = self._db.get_session()
        try:
            entry = session.get(KeyValueEntry, key)
            return None if entry is None else entry.value
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read key '{key}': {e}") from e
        finally:
            session.close()

    def set_item(self, key: str, value: str) -> None:
        session = self._db.get_session()
        try:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()
            logger.debug("Stored key %s (%d bytes)", key, len(value))
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Failed to write key '{key}': {e}") from e
        finally:
            session.close()

    def remove_item(self, key: str) -> None:
        session = self._db.get_session()
        try:
            entry = session.get(KeyValueEntry, key)
            if entry is not None:
                session.delete(entry)
                session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Failed to remove key '{key}': {e}") from e
        finally:
            session.close()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()
