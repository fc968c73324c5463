"""Domain entities: Users and Courses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from lms.domain.exceptions import CapacityError

MAX_STUDENTS = 50


class Role(StrEnum):
    """User role enum."""

    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"

    @classmethod
    def values(cls) -> list[str]:
        """All role values, in declaration order."""
        return [role.value for role in cls]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass
class User:
    """A person known to the LMS.

    Attributes:
        id: Unique positive ID assigned by the repository.
        name: Display name.
        email: Email address, unique per repository.
        role: The user's role.
        enrolled_courses: IDs of courses the user is enrolled in, without duplicates.
        is_active: Informational flag, always True for now.
        created_at: Creation timestamp (UTC).
    """

    id: int
    name: str
    email: str
    role: Role = Role.STUDENT
    enrolled_courses: list[int] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)

    def enroll(self, course_id: int) -> bool:
        """Record enrollment in a course.

        Returns:
            True if the course was newly added, False if already enrolled.
        """
        if course_id in self.enrolled_courses:
            return False
        self.enrolled_courses.append(course_id)
        return True

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, email={self.email!r}, role={self.role.value!r})>"


@dataclass
class Course:
    """A course students can enroll in once it is published.

    Attributes:
        id: Unique positive ID assigned by the repository.
        title: Course title.
        description: Course description.
        instructor_id: ID of the instructor who owns the course.
        enrolled_students: IDs of enrolled students, without duplicates.
        max_students: Enrollment limit.
        is_published: Whether the course accepts enrollments. Never reset.
        created_at: Creation timestamp (UTC).
    """

    id: int
    title: str
    description: str
    instructor_id: int
    enrolled_students: list[int] = field(default_factory=list)
    max_students: int = MAX_STUDENTS
    is_published: bool = False
    created_at: datetime = field(default_factory=utc_now)

    @property
    def enrollment_count(self) -> int:
        """Number of enrolled students."""
        return len(self.enrolled_students)

    @property
    def is_full(self) -> bool:
        """Whether the course has reached max_students."""
        return self.enrollment_count >= self.max_students

    def publish(self) -> None:
        """Open the course for enrollment. Publishing twice is a no-op."""
        self.is_published = True

    def enroll_student(self, student_id: int) -> bool:
        """Add a student to the course.

        Args:
            student_id: ID of the student to add.

        Returns:
            True if the student was newly added, False if already enrolled.

        Raises:
            CapacityError: If the course is full.
        """
        if self.is_full:
            raise CapacityError("Course is at maximum capacity")
        if student_id in self.enrolled_students:
            return False
        self.enrolled_students.append(student_id)
        return True

    def __repr__(self) -> str:
        return (
            f"<Course(id={self.id!r}, title={self.title!r}, "
            f"is_published={self.is_published!r})>"
        )
