"""Repository - In-memory storage for Users and Courses."""

from lms.repository.models import RepositoryStats
from lms.repository.store import Repository

__all__ = [
    "Repository",
    "RepositoryStats",
]
