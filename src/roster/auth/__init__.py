"""Auth - credential verification and the session guard."""

from roster.auth.credentials import CredentialVerifier, StaticCredentialVerifier
from roster.auth.exceptions import AuthError, InvalidCredentialsError, NotAuthenticatedError
from roster.auth.session import Session, SessionGuard

__all__ = [
    "AuthError",
    "CredentialVerifier",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "Session",
    "SessionGuard",
    "StaticCredentialVerifier",
]
