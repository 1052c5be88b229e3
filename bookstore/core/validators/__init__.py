"""
Field validators for email addresses and joined dates.
"""

from .field_validator import (
    EMAIL_PATTERN,
    YYYYMMDD_PATTERN,
    validate_email,
    validate_joined_date,
)

__all__ = [
    "EMAIL_PATTERN",
    "YYYYMMDD_PATTERN",
    "validate_email",
    "validate_joined_date",
]
