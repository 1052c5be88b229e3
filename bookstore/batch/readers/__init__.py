"""
Dataset readers for the bookstore data files.
"""

from .dataset_reader import BookReader, CustomerReader, DatasetReader, PurchaseReader

__all__ = [
    "DatasetReader",
    "CustomerReader",
    "BookReader",
    "PurchaseReader",
]
