"""Repository - In-memory store for Users and Courses."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from lms.domain import (
    ConflictError,
    Course,
    InvalidInstructorError,
    NotFoundError,
    Role,
    User,
    create_course,
    create_user,
)
from lms.repository.models import RepositoryStats

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Repository:
    """Main API for storing and looking up entities.

    Each instance owns its collections and ID counters, so tests can build
    independent repositories. IDs start at 1 and are consumed only by
    successful creations. All mutations run under one re-entrant lock.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._courses: dict[int, Course] = {}
        self._next_user_id = 1
        self._next_course_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the repository lock for a multi-step mutation."""
        with self._lock:
            yield

    # --- User Operations ---

    def create_user(
        self, name: str | None, email: str | None, role: str | None = Role.STUDENT
    ) -> User:
        """Create and store a new user.

        Args:
            name: Display name
            email: Email address, must be unused
            role: admin, instructor or student (default); None is invalid

        Returns:
            Created User with a fresh ID

        Raises:
            ConflictError: If a user with this email already exists
            ValidationError: If a field is missing or invalid
        """
        with self._lock:
            if email is not None and self.find_user_by_email(email) is not None:
                raise ConflictError("User with this email already exists")

            user = create_user(self._next_user_id, name, email, role)
            self._next_user_id += 1
            self._users[user.id] = user

        logger.info("Created user %s (%s, role=%s)", user.id, user.email, user.role.value)
        return user

    def find_user_by_id(self, user_id: int | None) -> User | None:
        """Get user by ID, or None if absent."""
        if user_id is None:
            return None
        return self._users.get(user_id)

    def find_user_by_email(self, email: str) -> User | None:
        """Get user by email, or None if absent."""
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def get_user(self, user_id: int | None) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user doesn't exist
        """
        user = self.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def list_users(self) -> list[User]:
        """List all users in creation order."""
        with self._lock:
            return list(self._users.values())

    # --- Course Operations ---

    def create_course(
        self,
        title: str | None,
        description: str | None,
        instructor_id: int | None,
    ) -> Course:
        """Create and store a new course.

        Args:
            title: Course title
            description: Course description
            instructor_id: ID of a user with the instructor role

        Returns:
            Created, unpublished Course with a fresh ID

        Raises:
            InvalidInstructorError: If instructor_id is not an instructor
            ValidationError: If a field is missing
        """
        with self._lock:
            instructor = self.find_user_by_id(instructor_id)
            if instructor is None or instructor.role is not Role.INSTRUCTOR:
                raise InvalidInstructorError("Invalid instructor ID")

            course = create_course(self._next_course_id, title, description, instructor_id)
            self._next_course_id += 1
            self._courses[course.id] = course

        logger.info("Created course %s (%r, instructor=%s)", course.id, course.title, instructor.id)
        return course

    def find_course_by_id(self, course_id: int | None) -> Course | None:
        """Get course by ID, or None if absent."""
        if course_id is None:
            return None
        return self._courses.get(course_id)

    def get_course(self, course_id: int | None) -> Course:
        """Get course by ID.

        Raises:
            NotFoundError: If course doesn't exist
        """
        course = self.find_course_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found")
        return course

    def list_courses(self) -> list[Course]:
        """List all courses in creation order."""
        with self._lock:
            return list(self._courses.values())

    def publish_course(self, course_id: int | None) -> Course:
        """Publish a course. Already-published courses are left as they are.

        Raises:
            NotFoundError: If course doesn't exist
        """
        with self._lock:
            course = self.get_course(course_id)
            was_published = course.is_published
            course.publish()

        if not was_published:
            logger.info("Published course %s", course.id)
        return course

    def stats(self) -> RepositoryStats:
        """Count stored entities."""
        with self._lock:
            return RepositoryStats(
                total_users=len(self._users),
                total_courses=len(self._courses),
            )
