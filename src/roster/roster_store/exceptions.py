"""Custom exceptions for the Roster Store."""


class RosterStoreError(Exception):
    """Base exception for Roster Store errors."""


class DuplicateMatriculaError(RosterStoreError):
    """Another student already has this matricula."""

    def __init__(self, matricula: str) -> None:
        self.matricula = matricula
        super().__init__(f"Matricula '{matricula}' is already in use")


class NotFoundError(RosterStoreError):
    """Student with given ID does not exist."""

    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        super().__init__(f"Student with id '{student_id}' not found")
