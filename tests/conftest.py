"""Test configuration and fixtures for the library registry.

Each test gets fresh model instances and a fresh Library, and the global
configuration is reset around every test so environment overrides made by
one test never leak into another.
"""

from collections.abc import Generator

import pytest

from library_registry.config import LibraryConfig, reset_config
from library_registry.library import Library
from library_registry.models.book import Book
from library_registry.models.patron import Patron

# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def isolated_config() -> Generator[None, None, None]:
    """Make sure no test sees a configuration cached by another."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def test_config() -> LibraryConfig:
    """Provide a small, test-specific configuration."""
    return LibraryConfig(
        max_book_capacity=5,
        max_borrowed_books=2,
        max_patron_capacity=3,
        log_level="DEBUG",
    )


# === Model Fixtures ===


@pytest.fixture
def comedy_book() -> Book:
    """A book that is mostly funny."""
    return Book(
        title="Three Men in a Boat",
        author="Jerome K. Jerome",
        year_of_publication=1889,
        comic_value=3,
        dramatic_value=0,
        educational_value=0,
    )


@pytest.fixture
def drama_book() -> Book:
    """A book that is mostly dramatic."""
    return Book(
        title="Wuthering Heights",
        author="Emily Bronte",
        year_of_publication=1847,
        comic_value=0,
        dramatic_value=8,
        educational_value=1,
    )


@pytest.fixture
def textbook() -> Book:
    """A book that is purely educational."""
    return Book(
        title="The Elements",
        author="Euclid",
        year_of_publication=1482,
        comic_value=0,
        dramatic_value=0,
        educational_value=9,
    )


@pytest.fixture
def comedy_fan() -> Patron:
    """Patron who enjoys anything with a comic value of 3 or more."""
    return Patron(
        first_name="Jerome",
        last_name="Klapka",
        comic_tendency=2,
        dramatic_tendency=0,
        educational_tendency=0,
        enjoyment_threshold=5,
    )


@pytest.fixture
def omnivore() -> Patron:
    """Patron who enjoys every book."""
    return Patron(
        first_name="Ada",
        last_name="Reader",
        comic_tendency=1,
        dramatic_tendency=1,
        educational_tendency=1,
        enjoyment_threshold=0,
    )


# === Library Fixtures ===


@pytest.fixture
def library() -> Library:
    """A library with room for five books, three patrons, two loans each."""
    return Library(max_book_capacity=5, max_borrowed_books=2, max_patron_capacity=3)


@pytest.fixture
def stocked_library(
    library: Library,
    comedy_book: Book,
    drama_book: Book,
    textbook: Book,
    comedy_fan: Patron,
    omnivore: Patron,
) -> Library:
    """The library fixture with three books and two patrons registered.

    Book ids: comedy_book=0, drama_book=1, textbook=2.
    Patron ids: comedy_fan=0, omnivore=1.
    """
    for book in (comedy_book, drama_book, textbook):
        library.add_book_to_library(book)
    for patron in (comedy_fan, omnivore):
        library.register_patron_to_library(patron)
    return library
