"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster import __version__
from roster.api.dependencies import (
    close_roster_store,
    close_session_guard,
    init_roster_store,
    init_session_guard,
)
from roster.api.models import APIResponse
from roster.api.routes import auth, students
from roster.auth import (
    InvalidCredentialsError,
    NotAuthenticatedError,
    StaticCredentialVerifier,
)
from roster.config import RosterSettings
from roster.roster_store import DuplicateMatriculaError, NotFoundError, RosterStoreError
from roster.storage import StorageCorruptionError, StorageError
from roster.students import ValidationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: RosterSettings = app.state.settings

    # Startup
    init_roster_store(settings.db_path, settings.storage_key)
    verifier = StaticCredentialVerifier(settings.admin_username, settings.admin_password)
    if not verifier.configured:
        logger.warning("Admin credentials are not configured; every login will be rejected")
    init_session_guard(verifier)

    yield
    # Shutdown
    close_session_guard()
    close_roster_store()


def _error(status_code: int, message: str, details: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message, details=details).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to HTTP responses."""

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(
        _request: Request, _exc: NotAuthenticatedError
    ) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, "Login required")

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        _request: Request, _exc: InvalidCredentialsError
    ) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, "Invalid username or password")

    @app.exception_handler(ValidationError)
    async def validation_handler(_request: Request, exc: ValidationError) -> JSONResponse:
        return _error(422, "Invalid student data", exc.errors)

    @app.exception_handler(DuplicateMatriculaError)
    async def duplicate_matricula_handler(
        _request: Request, exc: DuplicateMatriculaError
    ) -> JSONResponse:
        return _error(
            status.HTTP_409_CONFLICT,
            "Matricula already in use",
            {"matricula": str(exc)},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_request: Request, _exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Student not found")

    @app.exception_handler(StorageCorruptionError)
    async def storage_corruption_handler(
        _request: Request, exc: StorageCorruptionError
    ) -> JSONResponse:
        logger.error("Stored roster is corrupted: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Stored roster is corrupted")

    @app.exception_handler(StorageError)
    async def storage_error_handler(_request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(RosterStoreError)
    async def roster_store_error_handler(
        _request: Request, _exc: RosterStoreError
    ) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: RosterSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Roster API",
        description="REST API for the student roster",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings if settings is not None else RosterSettings().with_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api/v1")
    app.include_router(students.router, prefix="/api/v1")

    return app
