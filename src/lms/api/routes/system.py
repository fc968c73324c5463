"""Service endpoints: health check and API index."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from lms import APP_VERSION
from lms.api.dependencies import RepositoryDep
from lms.api.models import HealthResponse, IndexResponse, StatsResponse

router = APIRouter(tags=["system"])

ENDPOINTS = {
    "health": "GET /health",
    "users": {
        "create": "POST /api/users",
        "list": "GET /api/users",
        "get": "GET /api/users/:id",
    },
    "courses": {
        "create": "POST /api/courses",
        "list": "GET /api/courses",
        "get": "GET /api/courses/:id",
        "publish": "PUT /api/courses/:id/publish",
        "enroll": "POST /api/courses/:id/enroll",
    },
}


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    """Report service health and uptime in seconds."""
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        version=APP_VERSION,
        uptime=int(time.monotonic() - started_at),
    )


@router.get("/", response_model=IndexResponse)
def index(repository: RepositoryDep) -> IndexResponse:
    """Describe the API and report entity counts."""
    stats = repository.stats()
    return IndexResponse(
        message="Welcome to the Learning Management System!",
        version=APP_VERSION,
        endpoints=ENDPOINTS,
        stats=StatsResponse(total_users=stats.total_users, total_courses=stats.total_courses),
    )
