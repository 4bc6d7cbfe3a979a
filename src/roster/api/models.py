"""Pydantic models for REST API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from roster.students.models import Student

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None
    details: dict[str, str] | None = None


# Auth models


class LoginRequest(BaseModel):
    """Request model for logging in."""

    username: str
    password: str


class SessionResponse(BaseModel):
    """Response model for the current login state."""

    authenticated: bool
    username: str | None = None


# Student models


class StudentPayload(BaseModel):
    """Request model for creating or replacing a student.

    Fields are loose so that every rule is checked by the store's
    validation; a missing field is simply left out of the draft.
    """

    model_config = ConfigDict(populate_by_name=True)

    nome: str | None = None
    matricula: str | None = None
    email: str | None = None
    data_nascimento: str | None = Field(default=None, alias="dataNascimento")

    def to_draft_input(self) -> dict[str, str]:
        """Fields that were provided, keyed by stored field name."""
        return self.model_dump(by_alias=True, exclude_none=True)


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    nome: str
    matricula: str
    email: str
    data_nascimento: str = Field(..., alias="dataNascimento")


def student_to_response(student: Student) -> StudentResponse:
    """Convert a Student to StudentResponse."""
    return StudentResponse.model_validate(student.to_record())
