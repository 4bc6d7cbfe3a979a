"""REST API for the student roster."""

from roster.api.app import create_app, register_exception_handlers
from roster.api.models import (
    APIResponse,
    LoginRequest,
    SessionResponse,
    StudentPayload,
    StudentResponse,
)

__all__ = [
    "APIResponse",
    "LoginRequest",
    "SessionResponse",
    "StudentPayload",
    "StudentResponse",
    "create_app",
    "register_exception_handlers",
]
