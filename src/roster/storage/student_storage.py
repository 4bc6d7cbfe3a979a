"""Roster persistence: the whole roster as one JSON array under one key."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Protocol

import pydantic

from roster.storage.backends import KeyValueBackend
from roster.storage.exceptions import StorageCorruptionError
from roster.students.models import Student

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "students"


class StudentStorage(Protocol):
    """Interface for loading and saving the full roster."""

    def load(self) -> list[Student] | None:
        """Return the persisted roster in order, or None if nothing is stored."""
        ...

    def save_all(self, students: Sequence[Student]) -> None:
        """Replace the persisted roster with students."""
        ...


class KeyValueStudentStorage:
    """StudentStorage over a KeyValueBackend.

    The roster is serialized as a JSON array of
    ``{id, nome, matricula, email, dataNascimento}`` objects and rewritten
    in full on every save.
    """

    def __init__(self, backend: KeyValueBackend, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._backend = backend
        self.key = key

    def load(self) -> list[Student] | None:
        """Read and decode the stored roster.

        Returns:
            The students in stored order, or None when the key is absent.

        Raises:
            StorageCorruptionError: If the blob is not a JSON array of
                student records, or repeats an id or matricula.
        """
        blob = self._backend.get_item(self.key)
        if blob is None:
            return None

        try:
            raw = json.loads(blob)
        except (json.JSONDecodeError, RecursionError) as e:
            raise StorageCorruptionError(
                f"Stored roster under '{self.key}' is not valid JSON: {e}"
            ) from e

        if not isinstance(raw, list):
            raise StorageCorruptionError(
                f"Stored roster under '{self.key}' must be a JSON array, got {type(raw).__name__}"
            )

        students: list[Student] = []
        seen_ids: set[str] = set()
        seen_matriculas: set[str] = set()
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise StorageCorruptionError(f"Roster entry {index} is not an object")
            try:
                student = Student.model_validate(item)
            except pydantic.ValidationError as e:
                raise StorageCorruptionError(
                    f"Roster entry {index} is not a student record: {e}"
                ) from e
            if student.id in seen_ids:
                raise StorageCorruptionError(f"Roster entry {index} repeats id '{student.id}'")
            if student.matricula in seen_matriculas:
                raise StorageCorruptionError(
                    f"Roster entry {index} repeats matricula '{student.matricula}'"
                )
            seen_ids.add(student.id)
            seen_matriculas.add(student.matricula)
            students.append(student)

        logger.debug("Loaded %d students from key %s", len(students), self.key)
        return students

    def save_all(self, students: Sequence[Student]) -> None:
        """Serialize and store the full roster."""
        blob = json.dumps([s.to_record() for s in students], ensure_ascii=False)
        self._backend.set_item(self.key, blob)
