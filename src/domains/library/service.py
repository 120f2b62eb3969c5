# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Library book service.

Book CRUD plus borrow/return through the lending ledger. Every response
resolves the active borrows to the borrower's display names; a borrow
whose borrower no longer exists is returned with a null borrower.
"""

import logging
from collections.abc import Sequence

from src.domains.common import parse_id, present_changes
from src.domains.library.ledger import (
    BORROWER_COLLECTIONS,
    BookNotFoundError,
    BorrowerType,
    LendingLedger,
    borrow_records,
)
from src.infrastructure.database.models import Book
from src.infrastructure.database.store import SchoolStore
from src.models.book import (
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    BorrowEntry,
    BorrowerSummary,
)

logger = logging.getLogger(__name__)


class BookService:
    """Service for managing library books.

    Attributes:
        store: Document store.
        ledger: Borrow/return state machine.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store
        self.ledger = LendingLedger(store)

    async def create_books(self, requests: Sequence[BookCreateRequest]) -> list[BookResponse]:
        """Add one or more books with no active borrows."""
        books = await self.store.books.insert_many(
            [{**request.model_dump(), "borrowed_by": []} for request in requests]
        )
        logger.info("Created %d book(s)", len(books))
        return await self._to_responses(books)

    async def list_books(self) -> list[BookResponse]:
        """List all books."""
        return await self._to_responses(await self.store.books.find_all())

    async def get_book(self, book_id: str) -> BookResponse:
        """Get a book by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            BookNotFoundError: If book not found.
        """
        book = await self._get_book(book_id)
        return (await self._to_responses([book]))[0]

    async def update_book(self, book_id: str, request: BookUpdateRequest) -> BookResponse:
        """Update a book's catalogue fields.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            BookNotFoundError: If book not found.
        """
        book = await self._get_book(book_id)

        for field, value in present_changes(request.model_dump(exclude_unset=True)).items():
            setattr(book, field, value)
        await self.store.books.save(book)

        logger.info("Updated book: %s", book.id)
        return (await self._to_responses([book]))[0]

    async def delete_book(self, book_id: str) -> None:
        """Delete a book.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            BookNotFoundError: If book not found.
        """
        book = await self.store.books.delete_by_id(parse_id(book_id, "book"))
        if book is None:
            raise BookNotFoundError("Book not found")
        logger.info("Deleted book: %s", book.id)

    async def borrow_book(
        self,
        book_id: str,
        borrower_id: str,
        borrower_type: str,
    ) -> BookResponse:
        """Lend a copy and return the book with borrowers resolved."""
        book = await self.ledger.borrow(book_id, borrower_id, borrower_type)
        return (await self._to_responses([book]))[0]

    async def return_book(self, book_id: str, borrower_id: str) -> BookResponse:
        """Take back a copy and return the book with borrowers resolved."""
        book = await self.ledger.return_book(book_id, borrower_id)
        return (await self._to_responses([book]))[0]

    async def _get_book(self, book_id: str) -> Book:
        book = await self.store.books.find_by_id(parse_id(book_id, "book"))
        if book is None:
            raise BookNotFoundError("Book not found")
        return book

    async def _to_responses(self, books: Sequence[Book]) -> list[BookResponse]:
        records = {book.id: borrow_records(book) for book in books}

        borrowers: dict[BorrowerType, dict[str, BorrowerSummary]] = {}
        for kind, collection in BORROWER_COLLECTIONS.items():
            ids = [
                record.borrower_id
                for book_records in records.values()
                for record in book_records
                if record.borrower_type is kind
            ]
            borrowers[kind] = {
                doc.id: BorrowerSummary(
                    id=doc.id,
                    first_name=doc.first_name,
                    last_name=doc.last_name,
                )
                for doc in await self.store.collection(collection).find_by_ids(ids)
            }

        return [
            BookResponse(
                id=book.id,
                created_at=book.created_at,
                book_title=book.book_title,
                author=book.author,
                publisher=book.publisher,
                publication_year=book.publication_year,
                shelve_location=book.shelve_location,
                genre=book.genre,
                copies_available=book.copies_available,
                borrowed_by=[
                    BorrowEntry(
                        borrower_id=borrowers[record.borrower_type].get(record.borrower_id),
                        borrower_type=record.borrower_type.value,
                    )
                    for record in records[book.id]
                ],
            )
            for book in books
        ]
