"""
Line parsers turning delimited text lines into records.
"""

from .base_parser import (
    FIELD_DELIMITER,
    LineParser,
    parse_float,
    parse_identifier,
    parse_int,
)
from .book_parser import BookParser
from .customer_parser import CustomerParser
from .purchase_parser import PurchaseParser

__all__ = [
    "FIELD_DELIMITER",
    "LineParser",
    "CustomerParser",
    "BookParser",
    "PurchaseParser",
    "parse_identifier",
    "parse_int",
    "parse_float",
]
