"""
Batch loading of the bookstore data files.
"""

from .loader import DataLoader, Dataset, load_dataset

__all__ = [
    "DataLoader",
    "Dataset",
    "load_dataset",
]
