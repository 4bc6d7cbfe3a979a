"""Field-level validation for student drafts.

Validation is pure and shared by the create and edit paths: both go through
validate_draft, which collects every failing field instead of stopping at
the first one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pydantic

from roster.students.exceptions import ValidationError
from roster.students.models import (
    EMAIL_MAX_LENGTH,
    MATRICULA_MAX_LENGTH,
    NOME_MAX_LENGTH,
    NOME_MIN_LENGTH,
    StudentDraft,
)

# Keyed by the stored field name, which is also what callers display.
FIELD_MESSAGES = {
    "nome": f"Name must be between {NOME_MIN_LENGTH} and {NOME_MAX_LENGTH} characters",
    "matricula": f"Matricula is required and must be at most {MATRICULA_MAX_LENGTH} characters",
    "email": f"E-mail must be a valid address of at most {EMAIL_MAX_LENGTH} characters",
    "dataNascimento": "Birth date is required",
}

_FIELD_ALIASES = {"data_nascimento": "dataNascimento"}


def _field_key(loc: tuple[Any, ...]) -> str:
    name = str(loc[0]) if loc else "__root__"
    return _FIELD_ALIASES.get(name, name)


def validate_draft(data: Mapping[str, Any] | StudentDraft) -> StudentDraft:
    """Validate student input and return a StudentDraft.

    Args:
        data: A mapping using either stored (``dataNascimento``) or Python
            (``data_nascimento``) field names, or an existing StudentDraft.
            Unknown keys, including ``id``, are ignored.

    Returns:
        The validated draft.

    Raises:
        ValidationError: If any field is missing or breaks its rule. The
            ``errors`` attribute maps each failing field to a message.
    """
    if isinstance(data, StudentDraft):
        data = data.model_dump(by_alias=True)
    if not isinstance(data, Mapping):
        raise ValidationError({"__root__": "Student data must be a mapping"})

    try:
        return StudentDraft.model_validate(dict(data))
    except pydantic.ValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            key = _field_key(error["loc"])
            if key in errors:
                continue
            if error["type"] == "missing":
                errors[key] = "This field is required"
            else:
                errors[key] = FIELD_MESSAGES.get(key, error["msg"])
        raise ValidationError(errors) from e
