"""
Book model for the library registry.

A book carries three literary ratings (comic, dramatic, educational) that
patrons weigh against their own tendencies, and the id of the patron currently
holding it. The ratings are fixed once the book is created; only the borrower
id changes, through the library's borrow and return operations.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Borrower id of a book nobody holds
NOT_BORROWED = -1


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    Books are compared by identity inside a Library: two books with the same
    title and ratings are still two separate catalog entries.
    """

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        frozen=True,
        examples=["Pride and Prejudice", "A Brief History of Time"],
    )

    author: str = Field(
        ...,
        description="The author of the book",
        min_length=1,
        max_length=200,
        frozen=True,
        examples=["Jane Austen", "Stephen Hawking"],
    )

    year_of_publication: StrictInt = Field(
        ...,
        description="Year the book was published",
        frozen=True,
        examples=[1813, 1988],
    )

    comic_value: StrictInt = Field(
        ...,
        description="How funny the book is",
        frozen=True,
        examples=[0, 3, 7],
    )

    dramatic_value: StrictInt = Field(
        ...,
        description="How dramatic the book is",
        frozen=True,
        examples=[0, 5, 9],
    )

    educational_value: StrictInt = Field(
        ...,
        description="How educational the book is",
        frozen=True,
        examples=[0, 2, 10],
    )

    current_borrower_id: StrictInt = Field(
        default=NOT_BORROWED,
        description="Id of the patron holding the book, -1 if nobody does",
        ge=NOT_BORROWED,
    )

    @property
    def literary_value(self) -> int:
        """Sum of the three ratings."""
        return self.comic_value + self.dramatic_value + self.educational_value

    @property
    def is_borrowed(self) -> bool:
        return self.current_borrower_id != NOT_BORROWED

    def set_borrower_id(self, borrower_id: int) -> None:
        """
        Mark the book as held by the given patron id.

        Raises:
            ValidationError: If the id is below -1
        """
        self.current_borrower_id = borrower_id

    def return_book(self) -> None:
        """Mark the book as back on the shelf."""
        self.current_borrower_id = NOT_BORROWED

    def string_representation(self) -> str:
        """Return ``[title,author,year,literary_value]``."""
        return f"[{self.title},{self.author},{self.year_of_publication},{self.literary_value}]"

    def __str__(self) -> str:
        return self.string_representation()

    model_config = ConfigDict(
        # Borrower ids are checked on every set_borrower_id call
        validate_assignment=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "Pride and Prejudice",
                "author": "Jane Austen",
                "year_of_publication": 1813,
                "comic_value": 3,
                "dramatic_value": 7,
                "educational_value": 2,
                "current_borrower_id": -1,
            }
        },
    )
