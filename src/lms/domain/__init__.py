"""Domain - Users, Courses, validation and the error taxonomy."""

from lms.domain.exceptions import (
    CapacityError,
    ConflictError,
    InvalidInstructorError,
    LMSError,
    NotFoundError,
    StateError,
    ValidationError,
)
from lms.domain.factories import create_course, create_user
from lms.domain.models import MAX_STUDENTS, Course, Role, User
from lms.domain.validation import validate_email, validate_role

__all__ = [
    "MAX_STUDENTS",
    "CapacityError",
    "ConflictError",
    "Course",
    "InvalidInstructorError",
    "LMSError",
    "NotFoundError",
    "Role",
    "StateError",
    "User",
    "ValidationError",
    "create_course",
    "create_user",
    "validate_email",
    "validate_role",
]
