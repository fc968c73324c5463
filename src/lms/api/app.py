"""FastAPI application setup."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lms import APP_VERSION
from lms.api.models import ErrorResponse
from lms.api.routes import courses, system, users
from lms.config import Settings
from lms.domain import (
    CapacityError,
    ConflictError,
    InvalidInstructorError,
    LMSError,
    NotFoundError,
    StateError,
    ValidationError,
)
from lms.enrollment import EnrollmentService
from lms.logging import truncate_output
from lms.repository import Repository

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

# Looked up along the exception's MRO, so a subclass entry overrides its base
ERROR_STATUS_CODES: dict[type[LMSError], int] = {
    InvalidInstructorError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    StateError: status.HTTP_400_BAD_REQUEST,
    CapacityError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_code_for(exc: LMSError) -> int:
    """Map a domain error to its HTTP status code."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app.state.started_at = time.monotonic()
    logger.info("LMS API %s started", APP_VERSION)
    yield
    stats = app.state.repository.stats()
    logger.info(
        "LMS API stopped (users=%d, courses=%d)", stats.total_users, stats.total_courses
    )


def create_app(repository: Repository | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        repository: Store to serve. A fresh, empty Repository by default.
        settings: Server settings. Read from the environment by default.

    Returns:
        The configured application.
    """
    if settings is None:
        settings = Settings.from_env()
    if repository is None:
        repository = Repository()

    app = FastAPI(
        title="LMS API",
        description="REST API for a minimal Learning Management System",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    app.state.repository = repository
    app.state.enrollment_service = EnrollmentService(repository)
    app.state.started_at = time.monotonic()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(LMSError)
    async def lms_error_handler(request: Request, exc: LMSError) -> JSONResponse:
        status_code = status_code_for(exc)
        logger.info(
            "%s %s rejected with %d: %s", request.method, request.url.path, status_code, exc
        )
        return error_response(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        logger.info(
            "%s %s rejected with 400: %s",
            request.method,
            request.url.path,
            truncate_output(str(errors)),
        )
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    # Include routers
    app.include_router(system.router)
    app.include_router(users.router, prefix="/api")
    app.include_router(courses.router, prefix="/api")

    return app

