"""Custom exceptions for the Student entity model."""


class StudentError(Exception):
    """Base exception for Student entity errors."""


class ValidationError(StudentError):
    """One or more student fields failed validation.

    Attributes:
        errors: Mapping of field name to a human-readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid student data: {fields}")
