"""Student entity model - record shape and field validation."""

from roster.students.exceptions import StudentError, ValidationError
from roster.students.models import Student, StudentDraft, is_valid_email
from roster.students.validation import validate_draft

__all__ = [
    "Student",
    "StudentDraft",
    "StudentError",
    "ValidationError",
    "is_valid_email",
    "validate_draft",
]
