"""Custom exceptions for roster storage."""


class StorageError(Exception):
    """Base exception for storage errors."""


class StorageCorruptionError(StorageError):
    """Persisted roster is not a JSON array of student records."""
