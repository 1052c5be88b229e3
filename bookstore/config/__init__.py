"""
Settings for the bookstore loader.
"""

from .settings import BookstoreSettings, load_settings

__all__ = [
    "BookstoreSettings",
    "load_settings",
]
