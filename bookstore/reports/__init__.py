"""
Text reports over a loaded dataset.
"""

from .base_report import Report
from .books_report import BooksReport
from .customers_report import CustomersReport
from .purchases_report import PurchasesReport

__all__ = [
    "Report",
    "CustomersReport",
    "BooksReport",
    "PurchasesReport",
]
