"""Factory functions that validate input before building entities."""

from __future__ import annotations

from lms.domain.exceptions import ValidationError
from lms.domain.models import Course, Role, User
from lms.domain.validation import validate_email, validate_role


def create_user(
    user_id: int,
    name: str | None,
    email: str | None,
    role: str | None = Role.STUDENT,
) -> User:
    """Build a new User.

    Args:
        user_id: Fresh ID assigned by the repository.
        name: Display name, required.
        email: Email address, required and well-formed.
        role: One of admin, instructor, student. Defaults to student when omitted;
            an explicit None is invalid.

    Returns:
        The new User with no enrollments.

    Raises:
        ValidationError: If a field is missing or invalid.
    """
    if not name or not email:
        raise ValidationError("Name and email are required")
    if not validate_email(email):
        raise ValidationError("Invalid email format")
    if not validate_role(role):
        raise ValidationError("Invalid role. Must be admin, instructor, or student")

    return User(id=user_id, name=name, email=email, role=Role(role))


def create_course(
    course_id: int,
    title: str | None,
    description: str | None,
    instructor_id: int | None,
) -> Course:
    """Build a new, unpublished Course.

    Raises:
        ValidationError: If title, description or instructor_id is missing.
    """
    if not title or not description or not instructor_id:
        raise ValidationError("Title, description, and instructor ID are required")

    return Course(
        id=course_id,
        title=title,
        description=description,
        instructor_id=instructor_id,
    )
