"""FastAPI dependencies for dependency injection.

The Repository and EnrollmentService live on ``app.state`` and are created by
``create_app``, so every app instance has its own store.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from lms.enrollment import EnrollmentService
from lms.repository import Repository


def get_repository(request: Request) -> Repository:
    """Dependency that provides the app's Repository."""
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise RuntimeError("Repository not initialized. Build the app with create_app().")
    return repository


def get_enrollment_service(request: Request) -> EnrollmentService:
    """Dependency that provides the app's EnrollmentService."""
    service = getattr(request.app.state, "enrollment_service", None)
    if service is None:
        raise RuntimeError("EnrollmentService not initialized. Build the app with create_app().")
    return service


# Type aliases for dependency injection
RepositoryDep = Annotated[Repository, Depends(get_repository)]
EnrollmentServiceDep = Annotated[EnrollmentService, Depends(get_enrollment_service)]
