"""
Library Registry Package.

An in-memory, fixed-capacity catalog of books and registry of patrons with
borrowing rules driven by each patron's taste.

Key Components:
- models: Pydantic models for books and patrons
- library: the Library registry and its borrowing rules
- config: Configuration management with Pydantic v2
- logging_config: stderr logging setup for applications
"""

__version__ = "0.1.0"

from .config import LibraryConfig, get_config, reset_config
from .library import NO_SLOT, Library
from .logging_config import configure_logging
from .models import NOT_BORROWED, Book, Patron

__all__ = [
    "NOT_BORROWED",
    "NO_SLOT",
    "Book",
    "Library",
    "LibraryConfig",
    "Patron",
    "__version__",
    "configure_logging",
    "get_config",
    "reset_config",
]
