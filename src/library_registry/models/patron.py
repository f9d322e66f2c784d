"""
Patron model for the library registry.

A patron describes a reader's taste: three tendency weights that are applied
to a book's comic, dramatic and educational ratings, and the minimum score the
reader needs before a book is worth borrowing. Patrons never change after
they are created; the library keeps all borrowing state on the books.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .book import Book


class Patron(BaseModel):
    """
    Represents a library patron and their reading preferences.

    The score a patron assigns to a book is the weighted sum of the book's
    ratings, with the patron's tendencies as weights. A patron enjoys a book
    when that score reaches the enjoyment threshold.
    """

    first_name: str = Field(
        ...,
        description="First name of the patron",
        min_length=1,
        max_length=100,
        examples=["Elizabeth", "Fitzwilliam"],
    )

    last_name: str = Field(
        ...,
        description="Last name of the patron",
        min_length=1,
        max_length=100,
        examples=["Bennet", "Darcy"],
    )

    comic_tendency: StrictInt = Field(
        ...,
        description="Weight the patron gives to a book's comic value",
        examples=[0, 2, 5],
    )

    dramatic_tendency: StrictInt = Field(
        ...,
        description="Weight the patron gives to a book's dramatic value",
        examples=[0, 3, 7],
    )

    educational_tendency: StrictInt = Field(
        ...,
        description="Weight the patron gives to a book's educational value",
        examples=[0, 1, 4],
    )

    enjoyment_threshold: StrictInt = Field(
        ...,
        description="Minimum book score the patron needs to enjoy a book",
        examples=[5, 20, 42],
    )

    def get_book_score(self, book: Book) -> int:
        """Return the literary value this patron assigns to the given book."""
        return (
            self.comic_tendency * book.comic_value
            + self.dramatic_tendency * book.dramatic_value
            + self.educational_tendency * book.educational_value
        )

    def will_enjoy_book(self, book: Book) -> bool:
        """Return True if the book's score reaches the enjoyment threshold."""
        return self.get_book_score(book) >= self.enjoyment_threshold

    def string_representation(self) -> str:
        """Return the first and last name separated by a single space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.string_representation()

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "first_name": "Elizabeth",
                "last_name": "Bennet",
                "comic_tendency": 2,
                "dramatic_tendency": 3,
                "educational_tendency": 1,
                "enjoyment_threshold": 20,
            }
        },
    )
