"""Email and password checks used during registration."""

import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

MIN_PASSWORD_LENGTH = 8


def is_valid_email(email: Optional[str]) -> bool:
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: Optional[str]) -> bool:
    """Require the minimum length plus an uppercase, a lowercase and a digit."""
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        return False
    has_upper = any(c.isupper() for c in password)
    has_lower = any(c.islower() for c in password)
    has_digit = any(c.isdigit() for c in password)
    return has_upper and has_lower and has_digit
