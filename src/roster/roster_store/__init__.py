"""Roster Store - ordered student roster with write-through persistence."""

from roster.roster_store.exceptions import (
    DuplicateMatriculaError,
    NotFoundError,
    RosterStoreError,
)
from roster.roster_store.store import RosterStore

__all__ = [
    "DuplicateMatriculaError",
    "NotFoundError",
    "RosterStore",
    "RosterStoreError",
]
