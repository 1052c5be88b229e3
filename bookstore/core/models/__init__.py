"""
Core data models for the bookstore loader.

All models use Pydantic for runtime validation and are frozen once built.
"""

from .book import Book, BookBuilder
from .builder import RecordBuilder
from .customer import Customer, CustomerBuilder
from .load_summary import LoadSummary
from .purchase import Purchase, PurchaseBuilder
from .rejected_line import RejectedLine

__all__ = [
    "RecordBuilder",
    "Customer",
    "CustomerBuilder",
    "Book",
    "BookBuilder",
    "Purchase",
    "PurchaseBuilder",
    "RejectedLine",
    "LoadSummary",
]
