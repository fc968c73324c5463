"""Enrollment - Cross-entity enrollment of students in courses."""

from lms.enrollment.models import EnrollmentResult
from lms.enrollment.service import EnrollmentService

__all__ = [
    "EnrollmentResult",
    "EnrollmentService",
]
