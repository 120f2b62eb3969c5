# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Library book and lending API schemas."""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.models.common import CamelModel, DocumentResponse, at_least, not_blank
from src.utils.datetime import utc_now


def _publication_year(value: int) -> int:
    if not 1000 <= value <= utc_now().year:
        raise ValueError("Publication year must be a valid year")
    return value


BookTitle = Annotated[str, not_blank("Book title is required")]
Author = Annotated[str, not_blank("Author is required")]
Publisher = Annotated[str, not_blank("Publisher is required")]
PublicationYear = Annotated[int, AfterValidator(_publication_year)]
ShelveLocation = Annotated[str, not_blank("Shelve location is required")]
Genre = Annotated[str, not_blank("Genre is required")]
CopiesAvailable = Annotated[int, at_least(1, "Copies available must be a positive integer")]


class BookCreateRequest(CamelModel):
    """Request to add a book to the library.

    The borrow list always starts empty.
    """

    book_title: BookTitle = Field(description="Title")
    author: Author = Field(description="Author")
    publisher: Publisher = Field(description="Publisher")
    publication_year: PublicationYear = Field(description="Year of publication")
    shelve_location: ShelveLocation = Field(description="Shelf location code")
    genre: Genre = Field(description="Genre")
    copies_available: CopiesAvailable = Field(description="Copies on the shelf")


class BookUpdateRequest(CamelModel):
    """Partial book update. Borrow records cannot be edited here."""

    book_title: BookTitle | None = None
    author: Author | None = None
    publisher: Publisher | None = None
    publication_year: PublicationYear | None = None
    shelve_location: ShelveLocation | None = None
    genre: Genre | None = None
    copies_available: CopiesAvailable | None = None


class BorrowRequest(CamelModel):
    """Request to borrow one copy of a book.

    ``borrowerType`` is checked by the lending ledger, after copy
    availability, so it is accepted here as free text.
    """

    borrower_id: str = Field(description="Student or instructor ID")
    borrower_type: str = Field(description="Student or Instructor")


class ReturnRequest(CamelModel):
    """Request to return a borrowed copy."""

    borrower_id: str = Field(description="ID the book was borrowed under")


class BorrowerSummary(CamelModel):
    """Display fields of a borrower."""

    id: str
    first_name: str
    last_name: str


class BorrowEntry(CamelModel):
    """One active borrow. ``borrowerId`` is null if the borrower was deleted."""

    borrower_id: BorrowerSummary | None = None
    borrower_type: str


class BookResponse(DocumentResponse):
    """Book with its active borrows resolved to borrower names."""

    book_title: str
    author: str
    publisher: str
    publication_year: int
    shelve_location: str
    genre: str
    copies_available: int
    borrowed_by: list[BorrowEntry] = Field(default_factory=list)
