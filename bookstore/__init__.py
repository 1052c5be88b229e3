"""
Bookstore data loader.

Reads pipe-delimited customer, book and purchase files into validated,
immutable records and prints tabular reports over them.
"""

__version__ = "0.1.0"
