"""Pydantic models for the Student entity."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOME_MIN_LENGTH = 3
NOME_MAX_LENGTH = 100
MATRICULA_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255

# Local part may not start with a dot; ".." is rejected separately.
EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9_'+\-.]*[A-Za-z0-9_+\-]@([A-Za-z0-9][A-Za-z0-9\-]*\.)+[A-Za-z]{2,}$"
)


def is_valid_email(value: str) -> bool:
    """Check e-mail syntax. No DNS or deliverability checks."""
    if value.startswith(".") or ".." in value:
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


class StudentDraft(BaseModel):
    """Student fields as submitted on create or edit, without an id."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    nome: str = Field(..., min_length=NOME_MIN_LENGTH, max_length=NOME_MAX_LENGTH)
    matricula: str = Field(..., min_length=1, max_length=MATRICULA_MAX_LENGTH)
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LENGTH)
    data_nascimento: str = Field(..., min_length=1, alias="dataNascimento")

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("invalid e-mail address")
        return value


class Student(BaseModel):
    """A student record in the roster.

    Carries only the record shape. Field rules live on StudentDraft and are
    enforced by the store before a Student is ever built, so records read
    back from storage are not re-checked against them.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True, frozen=True)

    id: str
    nome: str
    matricula: str
    email: str
    data_nascimento: str = Field(..., alias="dataNascimento")

    @classmethod
    def from_draft(cls, student_id: str, draft: StudentDraft) -> Student:
        """Build a Student from a validated draft."""
        return cls(
            id=student_id,
            nome=draft.nome,
            matricula=draft.matricula,
            email=draft.email,
            data_nascimento=draft.data_nascimento,
        )

    def to_record(self) -> dict[str, Any]:
        """Return the persisted form, keyed by the stored field names."""
        return self.model_dump(by_alias=True)

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, matricula={self.matricula!r}, nome={self.nome!r})>"
