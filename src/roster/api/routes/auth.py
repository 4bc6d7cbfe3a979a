"""Login/logout endpoints."""

from fastapi import APIRouter

from roster.api.dependencies import SessionGuardDep
from roster.api.models import APIResponse, LoginRequest, SessionResponse
from roster.auth import InvalidCredentialsError, SessionGuard

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_response(guard: SessionGuard) -> SessionResponse:
    session = guard.session
    return SessionResponse(
        authenticated=session is not None,
        username=session.username if session is not None else None,
    )


@router.post("/login", response_model=APIResponse[SessionResponse])
def login(credentials: LoginRequest, guard: SessionGuardDep) -> APIResponse[SessionResponse]:
    """Log in with username and password."""
    if not guard.login(credentials.username, credentials.password):
        raise InvalidCredentialsError("Invalid username or password")
    return APIResponse(data=_session_response(guard))


@router.post("/logout", response_model=APIResponse[SessionResponse])
def logout(guard: SessionGuardDep) -> APIResponse[SessionResponse]:
    """Log out. Succeeds even when nobody is logged in."""
    guard.logout()
    return APIResponse(data=_session_response(guard))


@router.get("/session", response_model=APIResponse[SessionResponse])
def get_session(guard: SessionGuardDep) -> APIResponse[SessionResponse]:
    """Report whether a user is logged in."""
    return APIResponse(data=_session_response(guard))
