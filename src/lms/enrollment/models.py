"""Data models for the Enrollment module."""

from dataclasses import dataclass


@dataclass
class EnrollmentResult:
    """Outcome of enrolling a student in a course.

    Attributes:
        course_id: The course's ID.
        student_id: The student's ID.
        student_name: The student's display name.
        course_title: The course title.
        enrollment_count: Students enrolled in the course after the call.
        newly_enrolled: False when the student was already enrolled.
    """

    course_id: int
    student_id: int
    student_name: str
    course_title: str
    enrollment_count: int
    newly_enrolled: bool
