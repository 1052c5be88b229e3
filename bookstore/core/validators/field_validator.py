"""
Field validators for raw record strings.

Plain predicates over fixed, precompiled patterns. They hold no state and
never raise; callers decide which error to raise on a False result.
"""

import re
from re import Pattern
from typing import Any

EMAIL_PATTERN: Pattern = re.compile(
    r"^[_A-Za-z0-9\-+]+(\.[_A-Za-z0-9-]+)*@[A-Za-z0-9-]+(\.[A-Za-z0-9]+)*(\.[A-Za-z]{2,})$"
)

# valid for years 2000-2099; month/day ranges are checked when the date is built
YYYYMMDD_PATTERN: Pattern = re.compile(r"(20\d{2})(\d{2})(\d{2})", re.ASCII)


def validate_email(value: Any) -> bool:
    """
    Validate an email address string.

    Args:
        value: The email string

    Returns:
        True if the whole string is a valid email address, False otherwise

    Examples:
        >>> validate_email("john@example.com")
        True
        >>> validate_email("not-an-email")
        False
    """
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_joined_date(value: Any) -> bool:
    """
    Validate a joined date string in YYYYMMDD form.

    Examples:
        >>> validate_joined_date("20200115")
        True
        >>> validate_joined_date("19991231")
        False
    """
    if not isinstance(value, str):
        return False
    return YYYYMMDD_PATTERN.fullmatch(value) is not None
