# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Lending ledger.

Each book carries its own lending state: the number of copies on the shelf
and the list of active borrows. Borrowing moves one copy from the shelf to
a borrower, returning moves it back, so ``copies_available`` plus the
number of borrows stays constant between administrative edits.

A borrow is checked in a fixed order and the first failing check wins:

1. the book exists
2. a copy is on the shelf
3. the borrower type is ``Student`` or ``Instructor``
4. the borrower exists in that type's collection
5. the borrower does not already hold a copy

Borrow and return of the same book are serialized by an in-process lock
around the read-modify-write, so two concurrent borrows of the last copy
cannot both succeed within one server process.
"""

import asyncio
import logging
import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.domains.common import EntityServiceError, InvalidIdentifierError, parse_id
from src.infrastructure.database.models import Book
from src.infrastructure.database.store import SchoolStore

logger = logging.getLogger(__name__)


class BorrowerType(str, Enum):
    """Kind of borrower, as sent on the wire."""

    STUDENT = "Student"
    INSTRUCTOR = "Instructor"


# Collection each borrower type resolves to
BORROWER_COLLECTIONS: dict[BorrowerType, str] = {
    BorrowerType.STUDENT: "students",
    BorrowerType.INSTRUCTOR: "instructors",
}


@dataclass(frozen=True)
class BorrowRecord:
    """One active borrow of a book."""

    borrower_id: str
    borrower_type: BorrowerType

    @classmethod
    def from_document(cls, value: dict[str, Any]) -> "BorrowRecord":
        return cls(
            borrower_id=str(value["borrower_id"]),
            borrower_type=BorrowerType(value["borrower_type"]),
        )

    def to_document(self) -> dict[str, str]:
        return {
            "borrower_id": self.borrower_id,
            "borrower_type": self.borrower_type.value,
        }


class LibraryServiceError(EntityServiceError):
    """Base exception for library operations."""

    pass


class BookNotFoundError(LibraryServiceError):
    """Raised when book is not found."""

    pass


class LendingViolation(LibraryServiceError):
    """Raised when a borrow or return breaks a lending rule."""

    pass


class NoCopiesAvailableError(LendingViolation):
    """Raised when every copy is already borrowed."""

    pass


class InvalidBorrowerTypeError(LendingViolation):
    """Raised when the borrower type is neither Student nor Instructor."""

    pass


class BorrowerTypeMismatchError(LendingViolation):
    """Raised when the borrower does not exist in its type's collection."""

    pass


class AlreadyBorrowedError(LendingViolation):
    """Raised when the borrower already holds a copy."""

    pass


class NotBorrowedError(LendingViolation):
    """Raised when returning a book the borrower does not hold."""

    pass


_book_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


def book_lock(book_id: str) -> asyncio.Lock:
    """Get the lock serializing lending operations on one book."""
    lock = _book_locks.get(book_id)
    if lock is None:
        lock = asyncio.Lock()
        _book_locks[book_id] = lock
    return lock


def _canonical(value: str) -> str:
    try:
        return parse_id(value, "borrower")
    except InvalidIdentifierError:
        return str(value)


def borrow_records(book: Book) -> list[BorrowRecord]:
    """Decode the active borrows stored on a book."""
    return [BorrowRecord.from_document(entry) for entry in (book.borrowed_by or [])]


class LendingLedger:
    """Borrow and return operations on library books.

    Attributes:
        store: Document store holding books and borrowers.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store

    async def borrow(self, book_id: str, borrower_id: str, borrower_type: str) -> Book:
        """Lend one copy of a book.

        Args:
            book_id: Book to borrow.
            borrower_id: Student or instructor ID.
            borrower_type: "Student" or "Instructor".

        Returns:
            The updated book.

        Raises:
            InvalidIdentifierError: If the book ID is malformed.
            BookNotFoundError: If the book does not exist.
            NoCopiesAvailableError: If no copy is on the shelf.
            InvalidBorrowerTypeError: If the borrower type is unknown.
            BorrowerTypeMismatchError: If no borrower of that type has the ID.
            AlreadyBorrowedError: If the borrower already holds a copy.
        """
        book_id = parse_id(book_id, "book")

        async with book_lock(book_id):
            book = await self._get_book(book_id)

            if book.copies_available <= 0:
                raise NoCopiesAvailableError("No copies available")

            try:
                kind = BorrowerType(borrower_type)
            except ValueError as e:
                raise InvalidBorrowerTypeError("Invalid borrower type") from e

            borrower_id = await self._resolve_borrower(borrower_id, kind)

            records = borrow_records(book)
            if any(record.borrower_id == borrower_id for record in records):
                raise AlreadyBorrowedError("You already borrowed this book")

            records.append(BorrowRecord(borrower_id=borrower_id, borrower_type=kind))
            book.borrowed_by = [record.to_document() for record in records]
            book.copies_available -= 1
            await self.store.books.save(book)

        logger.info(
            "Book borrowed: book=%s, borrower=%s (%s), copies_available=%d",
            book.id,
            borrower_id,
            kind.value,
            book.copies_available,
        )
        return book

    async def return_book(self, book_id: str, borrower_id: str) -> Book:
        """Take back a borrowed copy.

        The borrow is matched by borrower ID only.

        Raises:
            InvalidIdentifierError: If the book ID is malformed.
            BookNotFoundError: If the book does not exist.
            NotBorrowedError: If the borrower holds no copy.
        """
        book_id = parse_id(book_id, "book")
        borrower_id = _canonical(borrower_id)

        async with book_lock(book_id):
            book = await self._get_book(book_id)

            records = borrow_records(book)
            index = next(
                (i for i, record in enumerate(records) if record.borrower_id == borrower_id),
                None,
            )
            if index is None:
                raise NotBorrowedError("You have not borrowed this book")

            del records[index]
            book.borrowed_by = [record.to_document() for record in records]
            book.copies_available += 1
            await self.store.books.save(book)

        logger.info(
            "Book returned: book=%s, borrower=%s, copies_available=%d",
            book.id,
            borrower_id,
            book.copies_available,
        )
        return book

    async def _get_book(self, book_id: str) -> Book:
        book = await self.store.books.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError("Book not found")
        return book

    async def _resolve_borrower(self, borrower_id: str, kind: BorrowerType) -> str:
        mismatch = BorrowerTypeMismatchError(f"Borrower ID does not match {kind.value} type")
        try:
            borrower_id = parse_id(borrower_id, kind.value.lower())
        except InvalidIdentifierError as e:
            raise mismatch from e

        collection = self.store.collection(BORROWER_COLLECTIONS[kind])
        if await collection.find_by_id(borrower_id) is None:
            raise mismatch
        return borrower_id
