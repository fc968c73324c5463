"""EnrollmentService - Enrolls students in published courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lms.domain import NotFoundError, Role, StateError
from lms.enrollment.models import EnrollmentResult

if TYPE_CHECKING:
    from lms.repository import Repository

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Coordinates the Course and User sides of an enrollment.

    A course and a student are updated together or not at all.
    """

    def __init__(self, repository: Repository) -> None:
        """Initialize the EnrollmentService.

        Args:
            repository: Repository holding the courses and users.
        """
        self.repository = repository

    def enroll_student_in_course(
        self, course_id: int | None, student_id: int | None
    ) -> EnrollmentResult:
        """Enroll a student in a course.

        Re-enrolling an enrolled student succeeds and changes nothing.

        Args:
            course_id: ID of the course.
            student_id: ID of a user with the student role.

        Returns:
            EnrollmentResult with the post-enrollment count.

        Raises:
            NotFoundError: If the course doesn't exist, or the user doesn't
                exist or isn't a student.
            StateError: If the course is not published.
            CapacityError: If the course is full.
        """
        with self.repository.transaction():
            course = self.repository.find_course_by_id(course_id)
            if course is None:
                raise NotFoundError("Course not found")

            student = self.repository.find_user_by_id(student_id)
            if student is None or student.role is not Role.STUDENT:
                raise NotFoundError("Student not found")

            if not course.is_published:
                raise StateError("Course is not published")

            # Course side first: it is the only side that can refuse
            added = course.enroll_student(student.id)
            student.enroll(course.id)

            result = EnrollmentResult(
                course_id=course.id,
                student_id=student.id,
                student_name=student.name,
                course_title=course.title,
                enrollment_count=course.enrollment_count,
                newly_enrolled=added,
            )

        if added:
            logger.info(
                "Enrolled student %s in course %s (%d/%d)",
                student.id,
                course.id,
                result.enrollment_count,
                course.max_students,
            )
        else:
            logger.debug("Student %s already enrolled in course %s", student.id, course.id)
        return result
