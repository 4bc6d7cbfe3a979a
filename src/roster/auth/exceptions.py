"""Custom exceptions for authentication."""


class AuthError(Exception):
    """Base exception for authentication errors."""


class NotAuthenticatedError(AuthError):
    """No user is logged in."""


class InvalidCredentialsError(AuthError):
    """Username/password pair was rejected."""
