# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Library API endpoints.

Book catalogue endpoints:
- POST /books - Add one or more books
- GET /books - List books
- GET /books/{book_id} - Get book details
- PUT /books/{book_id} - Update book
- DELETE /books/{book_id} - Delete book

Lending endpoints:
- POST /books/{book_id}/borrow - Borrow a copy
- POST /books/{book_id}/return - Return a copy
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import get_store
from src.domains.common import InvalidIdentifierError
from src.domains.library.ledger import BookNotFoundError, LendingViolation
from src.domains.library.service import BookService
from src.infrastructure.database.store import SchoolStore
from src.models.book import (
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    BorrowRequest,
    ReturnRequest,
)
from src.models.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(store: SchoolStore) -> BookService:
    """Get book service instance."""
    return BookService(store)


@router.post(
    "/books",
    response_model=list[BookResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add books",
    description="Add a single book or an array of books.",
)
async def create_books(
    data: BookCreateRequest | list[BookCreateRequest] = Body(...),
    store: SchoolStore = Depends(get_store),
) -> list[BookResponse]:
    requests = data if isinstance(data, list) else [data]
    logger.info("Adding %d book(s)", len(requests))

    return await _get_service(store).create_books(requests)


@router.get("/books", response_model=list[BookResponse], summary="List books")
async def list_books(
    store: SchoolStore = Depends(get_store),
) -> list[BookResponse]:
    """List all books with borrowers populated."""
    return await _get_service(store).list_books()


@router.get("/books/{book_id}", response_model=BookResponse, summary="Get book")
async def get_book(
    book_id: str,
    store: SchoolStore = Depends(get_store),
) -> BookResponse:
    try:
        return await _get_service(store).get_book(book_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/books/{book_id}", response_model=BookResponse, summary="Update book")
async def update_book(
    book_id: str,
    data: BookUpdateRequest,
    store: SchoolStore = Depends(get_store),
) -> BookResponse:
    try:
        return await _get_service(store).update_book(book_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/books/{book_id}", response_model=MessageResponse, summary="Delete book")
async def delete_book(
    book_id: str,
    store: SchoolStore = Depends(get_store),
) -> MessageResponse:
    try:
        await _get_service(store).delete_book(book_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return MessageResponse(message="Book deleted successfully")


@router.post(
    "/books/{book_id}/borrow",
    response_model=BookResponse,
    summary="Borrow book",
    description="Borrow one copy as a Student or an Instructor.",
)
async def borrow_book(
    book_id: str,
    data: BorrowRequest,
    store: SchoolStore = Depends(get_store),
) -> BookResponse:
    """Borrow a copy of a book.

    Raises:
        HTTPException: 404 if the book does not exist, 400 if the ID is
            malformed or a lending rule is broken.
    """
    try:
        return await _get_service(store).borrow_book(
            book_id,
            borrower_id=data.borrower_id,
            borrower_type=data.borrower_type,
        )
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except LendingViolation as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/books/{book_id}/return",
    response_model=BookResponse,
    summary="Return book",
)
async def return_book(
    book_id: str,
    data: ReturnRequest = Body(...),
    store: SchoolStore = Depends(get_store),
) -> BookResponse:
    """Return a borrowed copy of a book."""
    try:
        return await _get_service(store).return_book(book_id, borrower_id=data.borrower_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except LendingViolation as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
