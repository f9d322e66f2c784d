"""
Library Registry Models.

This package contains the Pydantic models for the two kinds of entities a
library keeps in its slots:
- Book: catalog items with literary ratings and a borrower id
- Patron: readers with taste weights and an enjoyment threshold
"""

from .book import NOT_BORROWED, Book
from .patron import Patron

__all__ = [
    "NOT_BORROWED",
    "Book",
    "Patron",
]
