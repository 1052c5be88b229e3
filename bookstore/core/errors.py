"""
Error taxonomy for the bookstore loader.

LoadError subclasses are fatal and abort the whole load.
RecordError subclasses are isolated to a single input line: the reader
logs them, keeps a RejectedLine and moves on.
"""

from typing import Any


class BookstoreError(Exception):
    """Base class for all bookstore errors."""


# =======================
# FATAL LOAD ERRORS
# =======================

class LoadError(BookstoreError):
    """Raised when a data source cannot be loaded at all."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DataSourceUnavailable(LoadError):
    """The input file is missing or cannot be opened."""


class IOFailure(LoadError):
    """The input file could not be read to the end."""


# =======================
# RECOVERABLE RECORD ERRORS
# =======================

class RecordError(BookstoreError):
    """Raised when a single line cannot be turned into a record."""


class MalformedRecord(RecordError):
    def __init__(self, expected: int, actual: int, fields: list[str]):
        self.expected = expected
        self.actual = actual
        self.fields = fields
        super().__init__(f"Expected {expected} but got {actual}: {fields}")


class InvalidIdentifier(RecordError):
    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid {field_name}: {value!r}")


class InvalidEmail(RecordError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid email: {value}")


class InvalidDate(RecordError):
    def __init__(self, value: str, record_id: int):
        self.value = value
        self.record_id = record_id
        super().__init__(f"Invalid joined date: {value} for customer {record_id}")


class InvalidCalendarDate(RecordError):
    def __init__(self, year: int, month: int, day: int, reason: str):
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        super().__init__(f"Invalid date {year:04d}-{month:02d}-{day:02d}: {reason}")


class InvalidField(RecordError):
    def __init__(self, field_name: str, value: Any, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name} {value!r}: {reason}")


class IncompleteRecord(RecordError):
    def __init__(self, entity: str, message: str):
        self.entity = entity
        self.message = message
        super().__init__(f"Cannot build {entity}: {message}")
