"""Storage - key/value persistence for the roster."""

from roster.storage.backends import KeyValueBackend, SqliteKeyValueBackend
from roster.storage.database import Database
from roster.storage.exceptions import StorageCorruptionError, StorageError
from roster.storage.student_storage import (
    DEFAULT_STORAGE_KEY,
    KeyValueStudentStorage,
    StudentStorage,
)

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "Database",
    "KeyValueBackend",
    "KeyValueStudentStorage",
    "SqliteKeyValueBackend",
    "StorageCorruptionError",
    "StorageError",
    "StudentStorage",
]
