"""Custom exceptions for the LMS domain."""


class LMSError(Exception):
    """Base exception for LMS domain errors."""


class ValidationError(LMSError):
    """Input is missing or has the wrong shape."""


class ConflictError(LMSError):
    """Entity clashes with an existing one (e.g. duplicate email)."""


class NotFoundError(LMSError):
    """Entity with given ID does not exist, or has the wrong role."""


class InvalidInstructorError(NotFoundError):
    """Course instructor ID does not reference an instructor."""


class StateError(LMSError):
    """Operation is not allowed in the entity's current state."""


class CapacityError(LMSError):
    """Course has reached its maximum number of students."""
