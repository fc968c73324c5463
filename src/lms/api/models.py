"""Pydantic models for the REST API.

JSON keys are camelCase; Python attributes stay snake_case.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - used at runtime by pydantic
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from lms.domain import Course, User  # noqa: TC001 - used in converters


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str


def parse_path_id(raw: str) -> int | None:
    """Parse an ID from a URL path segment.

    Returns:
        The integer ID, or None if the segment is not an integer. None never
        matches a stored entity, so the lookup reports it as not found.
    """
    try:
        return int(raw)
    except ValueError:
        return None


def body_id(value: int | str | None) -> int | None:
    """Keep an ID from a request body only if it was sent as a JSON integer."""
    return value if isinstance(value, int) else None


# User models


class UserCreate(CamelModel):
    """Request model for creating a user.

    Fields are optional here so that missing values are reported by domain
    validation with a 400, not by pydantic with a 422.
    """

    name: str | None = None
    email: str | None = None
    role: str | None = None


class UserSummary(CamelModel):
    """User fields returned after creation."""

    id: int
    name: str
    email: str
    role: str
    created_at: datetime


class UserCreateResponse(BaseModel):
    """Response model for POST /api/users."""

    message: str
    user: UserSummary


class UserListItem(CamelModel):
    """A user in the list view; enrolled_courses is a count."""

    id: int
    name: str
    email: str
    role: str
    enrolled_courses: int
    created_at: datetime


class UserListResponse(BaseModel):
    """Response model for GET /api/users."""

    users: list[UserListItem]
    total: int


class UserDetail(CamelModel):
    """A single user with the IDs of enrolled courses."""

    id: int
    name: str
    email: str
    role: str
    enrolled_courses: list[int]
    is_active: bool
    created_at: datetime


def user_to_summary(user: User) -> UserSummary:
    """Convert a User to UserSummary."""
    return UserSummary(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        created_at=user.created_at,
    )


def user_to_list_item(user: User) -> UserListItem:
    """Convert a User to UserListItem."""
    return UserListItem(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        enrolled_courses=len(user.enrolled_courses),
        created_at=user.created_at,
    )


def user_to_detail(user: User) -> UserDetail:
    """Convert a User to UserDetail."""
    return UserDetail(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        enrolled_courses=list(user.enrolled_courses),
        is_active=user.is_active,
        created_at=user.created_at,
    )


# Course models


class CourseCreate(CamelModel):
    """Request model for creating a course."""

    title: str | None = None
    description: str | None = None
    # A string ID is accepted here but never matches a user
    instructor_id: StrictInt | StrictStr | None = None


class CourseSummary(CamelModel):
    """Course fields returned after creation."""

    id: int
    title: str
    description: str
    instructor_id: int
    instructor_name: str
    enrolled_students: int
    max_students: int
    is_published: bool
    created_at: datetime


class CourseCreateResponse(BaseModel):
    """Response model for POST /api/courses."""

    message: str
    course: CourseSummary


class CourseListItem(CamelModel):
    """A course in the list view; enrolled_students is a count."""

    id: int
    title: str
    description: str
    instructor_name: str
    enrolled_students: int
    max_students: int
    is_published: bool
    created_at: datetime


class CourseListResponse(BaseModel):
    """Response model for GET /api/courses."""

    courses: list[CourseListItem]
    total: int


class CourseDetail(CamelModel):
    """A single course with the IDs of enrolled students."""

    id: int
    title: str
    description: str
    instructor: str
    enrolled_students: list[int]
    max_students: int
    is_published: bool
    created_at: datetime


class PublishedCourse(CamelModel):
    """Course fields returned after publishing."""

    id: int
    title: str
    is_published: bool


class PublishResponse(BaseModel):
    """Response model for PUT /api/courses/{id}/publish."""

    message: str
    course: PublishedCourse


class EnrollRequest(CamelModel):
    """Request model for enrolling a student."""

    student_id: StrictInt | StrictStr | None = None


class EnrollmentResponse(CamelModel):
    """Response model for POST /api/courses/{id}/enroll."""

    message: str
    student: str
    course: str
    enrollment_count: int


def course_to_summary(course: Course, instructor_name: str) -> CourseSummary:
    """Convert a Course to CourseSummary."""
    return CourseSummary(
        id=course.id,
        title=course.title,
        description=course.description,
        instructor_id=course.instructor_id,
        instructor_name=instructor_name,
        enrolled_students=course.enrollment_count,
        max_students=course.max_students,
        is_published=course.is_published,
        created_at=course.created_at,
    )


def course_to_list_item(course: Course, instructor_name: str) -> CourseListItem:
    """Convert a Course to CourseListItem."""
    return CourseListItem(
        id=course.id,
        title=course.title,
        description=course.description,
        instructor_name=instructor_name,
        enrolled_students=course.enrollment_count,
        max_students=course.max_students,
        is_published=course.is_published,
        created_at=course.created_at,
    )


def course_to_detail(course: Course, instructor_name: str) -> CourseDetail:
    """Convert a Course to CourseDetail."""
    return CourseDetail(
        id=course.id,
        title=course.title,
        description=course.description,
        instructor=instructor_name,
        enrolled_students=list(course.enrolled_students),
        max_students=course.max_students,
        is_published=course.is_published,
        created_at=course.created_at,
    )


# Service models


class HealthResponse(BaseModel):
    """Response model for GET /health."""

    status: str
    timestamp: datetime
    version: str
    uptime: int


class StatsResponse(CamelModel):
    """Entity counts shown on the index page."""

    total_users: int
    total_courses: int


class IndexResponse(BaseModel):
    """Response model for GET /."""

    message: str
    version: str
    endpoints: dict[str, Any]
    stats: StatsResponse
