"""Field validation for Users and Courses."""

from __future__ import annotations

import re

from lms.domain.models import Role

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(email: object) -> bool:
    """Check that an email has a basic ``local@domain.tld`` shape.

    No DNS or deliverability checks are made.

    Args:
        email: Candidate email address.

    Returns:
        True if the email is well-formed.
    """
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_role(role: object) -> bool:
    """Check that a role is one of admin, instructor or student."""
    return isinstance(role, str) and role in Role.values()
