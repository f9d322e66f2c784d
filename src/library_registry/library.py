"""
Library registry.

A Library owns a fixed number of slots for books and for patrons. Registering
an entity puts it in the first empty slot, and the slot index becomes its id
for the rest of the library's life; ids are never reused and slots are never
emptied. Occupied slots therefore always form a contiguous prefix, which every
scan below relies on: it stops at the first empty slot.

Membership is decided by identity (``is``), not equality. Two patrons with the
same name and tastes are two registrations.

No operation raises for a runtime condition. Failures are reported through
sentinels: -1 for "no room" or "not found", False for a refused borrow, and
None for "no suggestion".
"""

import logging
from collections.abc import Iterator
from typing import TypeVar

from .config import LibraryConfig, get_config
from .models.book import NOT_BORROWED, Book
from .models.patron import Patron

logger = logging.getLogger(__name__)

# Returned by registration and lookup when there is no slot to report
NO_SLOT = -1

EntityType = TypeVar("EntityType", Book, Patron)


def _occupied(slots: list[EntityType | None]) -> Iterator[tuple[int, EntityType]]:
    """Yield ``(slot, entity)`` for the occupied prefix of a slot list."""
    for slot, entity in enumerate(slots):
        if entity is None:
            return
        yield slot, entity


def _find_slot(slots: list[EntityType | None], entity: EntityType) -> int:
    for slot, candidate in _occupied(slots):
        if candidate is entity:
            return slot
    return NO_SLOT


def _place(slots: list[EntityType | None], entity: EntityType) -> int:
    """Put the entity in the first empty slot, or return its existing slot."""
    free_slot = 0
    for slot, candidate in _occupied(slots):
        if candidate is entity:
            return slot
        free_slot = slot + 1

    if free_slot >= len(slots):
        return NO_SLOT

    slots[free_slot] = entity
    return free_slot


def _is_slot_valid(slots: list[EntityType | None], slot: int) -> bool:
    # Negative indices would silently wrap around
    if slot < 0 or slot >= len(slots):
        return False
    return slots[slot] is not None


class Library:
    """
    A fixed-capacity catalog of books and registry of patrons.

    The library enforces borrowing rules: a patron may only borrow a book
    they will enjoy, that nobody else holds, and only while holding fewer
    than ``max_borrowed_books`` books.
    """

    def __init__(
        self,
        max_book_capacity: int,
        max_borrowed_books: int,
        max_patron_capacity: int,
    ) -> None:
        """
        Create an empty library.

        Args:
            max_book_capacity: Number of book slots
            max_borrowed_books: Books a single patron may hold at once
            max_patron_capacity: Number of patron slots

        Raises:
            ValueError: If any capacity is negative
        """
        for name, value in (
            ("max_book_capacity", max_book_capacity),
            ("max_borrowed_books", max_borrowed_books),
            ("max_patron_capacity", max_patron_capacity),
        ):
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        self.max_book_capacity = max_book_capacity
        self.max_borrowed_books = max_borrowed_books
        self.max_patron_capacity = max_patron_capacity

        self.book_list: list[Book | None] = [None] * max_book_capacity
        self.patron_list: list[Patron | None] = [None] * max_patron_capacity

    @classmethod
    def from_config(cls, config: LibraryConfig | None = None) -> "Library":
        """Create a library sized by the given (or global) configuration."""
        config = config or get_config()
        return cls(**config.capacities)

    def __repr__(self) -> str:
        return (
            f"Library(books={self.book_count}/{self.max_book_capacity}, "
            f"patrons={self.patron_count}/{self.max_patron_capacity}, "
            f"max_borrowed_books={self.max_borrowed_books})"
        )

    # === Registration ===

    def add_book_to_library(self, book: Book) -> int:
        """
        Add the book to this library if it isn't already in it.

        Returns:
            The book's id if it was added or was already present,
            -1 if every slot is taken.
        """
        book_id = _place(self.book_list, book)
        if book_id == NO_SLOT:
            logger.warning(
                "Book '%s' rejected - all %d book slots are taken",
                book.title,
                self.max_book_capacity,
            )
        else:
            logger.info("Book '%s' registered with id %d", book.title, book_id)
        return book_id

    def register_patron_to_library(self, patron: Patron) -> int:
        """
        Register the patron to this library if they aren't already registered.

        Returns:
            The patron's id if they were registered now or before,
            -1 if every slot is taken.
        """
        patron_id = _place(self.patron_list, patron)
        if patron_id == NO_SLOT:
            logger.warning(
                "Patron '%s' rejected - all %d patron slots are taken",
                patron,
                self.max_patron_capacity,
            )
        else:
            logger.info("Patron '%s' registered with id %d", patron, patron_id)
        return patron_id

    # === Lookup ===

    def is_book_id_valid(self, book_id: int) -> bool:
        """Return True if the id belongs to a book in this library."""
        return _is_slot_valid(self.book_list, book_id)

    def is_patron_id_valid(self, patron_id: int) -> bool:
        """Return True if the id belongs to a patron registered to this library."""
        return _is_slot_valid(self.patron_list, patron_id)

    def get_book_id(self, book: Book) -> int:
        """Return the id of this exact book object, or -1 if it isn't owned here."""
        return _find_slot(self.book_list, book)

    def get_patron_id(self, patron: Patron) -> int:
        """Return the id of this exact patron object, or -1 if not registered."""
        return _find_slot(self.patron_list, patron)

    def get_book(self, book_id: int) -> Book | None:
        if not self.is_book_id_valid(book_id):
            return None
        return self.book_list[book_id]

    def get_patron(self, patron_id: int) -> Patron | None:
        if not self.is_patron_id_valid(patron_id):
            return None
        return self.patron_list[patron_id]

    @property
    def book_count(self) -> int:
        """Number of occupied book slots."""
        return sum(1 for _ in _occupied(self.book_list))

    @property
    def patron_count(self) -> int:
        """Number of occupied patron slots."""
        return sum(1 for _ in _occupied(self.patron_list))

    # === Circulation ===

    def is_book_available(self, book_id: int) -> bool:
        """Return True if the id is valid and nobody is holding that book."""
        if not self.is_book_id_valid(book_id):
            return False
        return self.book_list[book_id].current_borrower_id == NOT_BORROWED

    def book_borrowed_for_patron_id(self, patron_id: int) -> int:
        """Return how many books the patron holds, 0 for an invalid id."""
        if not self.is_patron_id_valid(patron_id):
            return 0
        return sum(
            1
            for _, book in _occupied(self.book_list)
            if book.current_borrower_id == patron_id
        )

    def borrow_book(self, book_id: int, patron_id: int) -> bool:
        """
        Lend the book to the patron.

        The loan goes through only if both ids are valid, the patron will
        enjoy the book, the patron holds fewer than ``max_borrowed_books``
        books, and the book is available. Checks run in that order and stop
        at the first failure.

        Returns:
            True if the book was lent, False otherwise (nothing changes).
        """
        if not self.is_patron_id_valid(patron_id):
            logger.debug("Borrow refused - invalid patron id %s", patron_id)
            return False

        if not self.is_book_id_valid(book_id):
            logger.debug("Borrow refused - invalid book id %s", book_id)
            return False

        patron = self.patron_list[patron_id]
        book = self.book_list[book_id]

        if not patron.will_enjoy_book(book):
            logger.debug(
                "Borrow refused - '%s' scores %d for %s, below threshold %d",
                book.title,
                patron.get_book_score(book),
                patron,
                patron.enjoyment_threshold,
            )
            return False

        if self.book_borrowed_for_patron_id(patron_id) >= self.max_borrowed_books:
            logger.debug(
                "Borrow refused - %s already holds %d books",
                patron,
                self.max_borrowed_books,
            )
            return False

        if not self.is_book_available(book_id):
            logger.debug(
                "Borrow refused - '%s' is held by patron %d",
                book.title,
                book.current_borrower_id,
            )
            return False

        book.set_borrower_id(patron_id)
        logger.info("Book %d '%s' lent to patron %d", book_id, book.title, patron_id)
        return True

    def return_book(self, book_id: int) -> None:
        """Return the book with the given id. Invalid ids are ignored."""
        if not self.is_book_id_valid(book_id):
            return

        self.book_list[book_id].return_book()
        logger.info("Book %d returned", book_id)

    # === Suggestions ===

    def suggest_book_to_patron(self, patron_id: int) -> Book | None:
        """
        Suggest an available book the patron will enjoy.

        Books are tried in slot order and the first enjoyable available one
        is returned, even if a later book would score higher.

        Returns:
            The suggested book, or None if the patron id is invalid or no
            available book qualifies.
        """
        if not self.is_patron_id_valid(patron_id):
            return None

        patron = self.patron_list[patron_id]
        for book_id, book in _occupied(self.book_list):
            if not self.is_book_available(book_id):
                continue
            if patron.will_enjoy_book(book):
                return book

        return None

    def suggest_best_book_to_patron(self, patron_id: int) -> Book | None:
        """
        Suggest the available book the patron will enjoy the most.

        Ties go to the book in the lowest slot.
        """
        if not self.is_patron_id_valid(patron_id):
            return None

        patron = self.patron_list[patron_id]
        best: Book | None = None
        best_score = 0
        for book_id, book in _occupied(self.book_list):
            if not self.is_book_available(book_id) or not patron.will_enjoy_book(book):
                continue
            score = patron.get_book_score(book)
            if best is None or score > best_score:
                best, best_score = book, score

        return best
