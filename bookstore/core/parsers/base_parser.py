"""
Base line parser shared by all record types.

A parser turns one raw delimited line into one frozen record, or raises a
RecordError describing why it could not.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from bookstore.core.errors import InvalidField, InvalidIdentifier, MalformedRecord

FIELD_DELIMITER = "|"

_IDENTIFIER_PATTERN = re.compile(r"[0-9]+")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_identifier(value: str, field_name: str = "id") -> int:
    """
    Parse a non-negative integer identifier.

    Raises:
        InvalidIdentifier: If the value is not made of ASCII digits only
    """
    if not _IDENTIFIER_PATTERN.fullmatch(value):
        raise InvalidIdentifier(field_name, value)
    return int(value)


def parse_int(value: str, field_name: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise InvalidField(field_name, value, "not an integer")
    return int(value)


def parse_float(value: str, field_name: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise InvalidField(field_name, value, "not a number") from None
    if not math.isfinite(number):
        raise InvalidField(field_name, value, "not a finite number")
    return number


class LineParser(ABC):
    """
    Abstract base class for record parsers.

    Subclasses set `entity` and `record_class` and implement build(), which
    maps the already arity-checked fields onto the record's builder.
    """

    entity: str
    record_class: type[BaseModel]

    def __init__(self, delimiter: str = FIELD_DELIMITER):
        """
        Initialize parser.

        Args:
            delimiter: Literal field separator; it is escaped before splitting
        """
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self.delimiter = delimiter
        self._split_pattern = re.compile(re.escape(delimiter))

    @property
    def attribute_count(self) -> int:
        return self.record_class.ATTRIBUTE_COUNT

    def split(self, line: str) -> list[str]:
        """
        Split a raw line into its fields.

        The line terminator is removed and trailing empty fields are dropped,
        so "a|b||" gives ["a", "b"].
        """
        fields = self._split_pattern.split(line.rstrip("\r\n"))
        while fields and fields[-1] == "":
            fields.pop()
        return fields

    def parse(self, line: str) -> Any:
        """
        Parse one line into a record.

        Args:
            line: Raw line from the data file

        Returns:
            The frozen record

        Raises:
            MalformedRecord: If the field count differs from attribute_count
            RecordError: If any field fails its validation
        """
        fields = self.split(line)
        if len(fields) != self.attribute_count:
            raise MalformedRecord(self.attribute_count, len(fields), fields)
        return self.build(fields)

    @abstractmethod
    def build(self, fields: list[str]) -> Any:
        """Build a record from exactly attribute_count fields."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entity={self.entity}, delimiter={self.delimiter!r})"
