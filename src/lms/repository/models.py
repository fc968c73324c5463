"""Data models for the Repository module."""

from dataclasses import dataclass


@dataclass
class RepositoryStats:
    """Entity counts held by a repository.

    Attributes:
        total_users: Number of stored users.
        total_courses: Number of stored courses.
    """

    total_users: int
    total_courses: int
