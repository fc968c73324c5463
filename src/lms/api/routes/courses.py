"""Course endpoints: CRUD, publishing and enrollment."""

from fastapi import APIRouter, status

from lms.api.dependencies import EnrollmentServiceDep, RepositoryDep
from lms.api.models import (
    CourseCreate,
    CourseCreateResponse,
    CourseDetail,
    CourseListResponse,
    EnrollmentResponse,
    EnrollRequest,
    PublishedCourse,
    PublishResponse,
    body_id,
    course_to_detail,
    course_to_list_item,
    course_to_summary,
    parse_path_id,
)
from lms.repository import Repository

router = APIRouter(prefix="/courses", tags=["courses"])

UNKNOWN_INSTRUCTOR = "Unknown"


def _instructor_name(repository: Repository, instructor_id: int) -> str:
    instructor = repository.find_user_by_id(instructor_id)
    return instructor.name if instructor is not None else UNKNOWN_INSTRUCTOR


@router.post("", response_model=CourseCreateResponse, status_code=status.HTTP_201_CREATED)
def create_course(payload: CourseCreate, repository: RepositoryDep) -> CourseCreateResponse:
    """Create a new, unpublished course."""
    course = repository.create_course(
        title=payload.title,
        description=payload.description,
        instructor_id=body_id(payload.instructor_id),
    )
    return CourseCreateResponse(
        message="Course created successfully",
        course=course_to_summary(course, _instructor_name(repository, course.instructor_id)),
    )


@router.get("", response_model=CourseListResponse)
def list_courses(repository: RepositoryDep) -> CourseListResponse:
    """List all courses."""
    courses = repository.list_courses()
    return CourseListResponse(
        courses=[
            course_to_list_item(c, _instructor_name(repository, c.instructor_id)) for c in courses
        ],
        total=len(courses),
    )


@router.get("/{course_id}", response_model=CourseDetail)
def get_course(course_id: str, repository: RepositoryDep) -> CourseDetail:
    """Get a course by ID."""
    course = repository.get_course(parse_path_id(course_id))
    return course_to_detail(course, _instructor_name(repository, course.instructor_id))


@router.put("/{course_id}/publish", response_model=PublishResponse)
def publish_course(course_id: str, repository: RepositoryDep) -> PublishResponse:
    """Publish a course so students can enroll."""
    course = repository.publish_course(parse_path_id(course_id))
    return PublishResponse(
        message="Course published successfully",
        course=PublishedCourse(id=course.id, title=course.title, is_published=course.is_published),
    )


@router.post("/{course_id}/enroll", response_model=EnrollmentResponse)
def enroll_student(
    course_id: str, payload: EnrollRequest, service: EnrollmentServiceDep
) -> EnrollmentResponse:
    """Enroll a student in a published course."""
    result = service.enroll_student_in_course(
        parse_path_id(course_id), body_id(payload.student_id)
    )
    return EnrollmentResponse(
        message="Student enrolled successfully",
        student=result.student_name,
        course=result.course_title,
        enrollment_count=result.enrollment_count,
    )
