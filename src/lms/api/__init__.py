"""REST API for the LMS."""

from lms.api.app import create_app
from lms.api.models import (
    CourseCreate,
    EnrollRequest,
    ErrorResponse,
    UserCreate,
)

__all__ = [
    "CourseCreate",
    "EnrollRequest",
    "ErrorResponse",
    "UserCreate",
    "create_app",
]
