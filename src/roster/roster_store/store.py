"""RosterStore - Main API for roster operations."""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Mapping
from typing import Any

from roster.roster_store.exceptions import DuplicateMatriculaError, NotFoundError
from roster.storage.student_storage import StudentStorage
from roster.students.models import Student, StudentDraft
from roster.students.validation import validate_draft

logger = logging.getLogger(__name__)

DraftInput = Mapping[str, Any] | StudentDraft


class RosterStore:
    """Single source of truth for the ordered student roster.

    Every mutation validates first, checks matricula uniqueness, writes the
    complete next roster through to storage and only then swaps it into
    memory. A failure at any step leaves both memory and storage as they were.
    Loads and mutations are serialized by a lock, so the store can be shared
    by request handler threads.
    """

    def __init__(self, storage: StudentStorage) -> None:
        """Initialize the store and load the persisted roster.

        Args:
            storage: Where the roster is loaded from and saved to.

        Raises:
            StorageCorruptionError: If the persisted roster is malformed.
        """
        self._storage = storage
        self._students: list[Student] = []
        self._lock = threading.Lock()
        self.load()

    def __len__(self) -> int:
        return len(self._students)

    def load(self) -> list[Student]:
        """(Re)load the roster from storage.

        An absent roster loads as empty. A malformed one raises and leaves
        the in-memory roster untouched.

        Returns:
            The loaded students, in stored order.

        Raises:
            StorageCorruptionError: If the persisted roster is malformed.
        """
        with self._lock:
            stored = self._storage.load()
            self._students = list(stored) if stored is not None else []
            logger.info("Roster loaded with %d students", len(self._students))
            return list(self._students)

    def list_students(self) -> list[Student]:
        """List all students in insertion order."""
        return list(self._students)

    def get_student(self, student_id: str) -> Student:
        """Get student by ID.

        Raises:
            NotFoundError: If no student has this ID.
        """
        return self._students[self._index_of(student_id)]

    def existing_matriculas(self, exclude_id: str | None = None) -> list[str]:
        """Matriculas already taken, optionally ignoring one student.

        Args:
            exclude_id: ID of the student being edited, whose own matricula
                does not count as taken.
        """
        return [s.matricula for s in self._students if s.id != exclude_id]

    def add_student(self, draft: DraftInput) -> Student:
        """Create a new student at the end of the roster.

        Args:
            draft: Student fields without an id.

        Returns:
            The created Student with a generated ID.

        Raises:
            ValidationError: If a field breaks its rule.
            DuplicateMatriculaError: If the matricula is already in use.
        """
        valid = validate_draft(draft)
        with self._lock:
            self._check_matricula(valid.matricula)

            student = Student.from_draft(self._new_id(), valid)
            self._commit([*self._students, student])
        logger.info("Added student %s (matricula %s)", student.id, student.matricula)
        return student

    def update_student(self, student_id: str, draft: DraftInput) -> Student:
        """Replace every field except the ID, keeping the roster position.

        A student may keep their own matricula.

        Args:
            student_id: The student's unique ID
            draft: The new field values

        Returns:
            The updated Student

        Raises:
            NotFoundError: If no student has this ID.
            ValidationError: If a field breaks its rule.
            DuplicateMatriculaError: If another student has the matricula.
        """
        with self._lock:
            index = self._index_of(student_id)
            valid = validate_draft(draft)
            self._check_matricula(valid.matricula, exclude_id=student_id)

            updated = Student.from_draft(student_id, valid)
            students = list(self._students)
            students[index] = updated
            self._commit(students)
        logger.info("Updated student %s", student_id)
        return updated

    def remove_student(self, student_id: str) -> None:
        """Delete a student permanently.

        Raises:
            NotFoundError: If no student has this ID, including one already removed.
        """
        with self._lock:
            index = self._index_of(student_id)
            students = list(self._students)
            del students[index]
            self._commit(students)
        logger.info("Removed student %s", student_id)

    # --- internals ---

    def _index_of(self, student_id: str) -> int:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index
        raise NotFoundError(student_id)

    def _check_matricula(self, matricula: str, exclude_id: str | None = None) -> None:
        # Exact, case-sensitive comparison with no trimming.
        if matricula in self.existing_matriculas(exclude_id=exclude_id):
            logger.warning("Rejected duplicate matricula %s", matricula)
            raise DuplicateMatriculaError(matricula)

    def _new_id(self) -> str:
        taken = {s.id for s in self._students}
        while True:
            student_id = str(uuid.uuid4())
            if student_id not in taken:
                return student_id

    def _commit(self, students: list[Student]) -> None:
        self._storage.save_all(students)
        self._students = students
