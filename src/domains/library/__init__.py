# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Library domain package.

Book catalogue management and the lending ledger.
"""

from src.domains.library.ledger import (
    AlreadyBorrowedError,
    BookNotFoundError,
    BorrowerType,
    BorrowerTypeMismatchError,
    BorrowRecord,
    InvalidBorrowerTypeError,
    LendingLedger,
    LendingViolation,
    LibraryServiceError,
    NoCopiesAvailableError,
    NotBorrowedError,
)
from src.domains.library.service import BookService

__all__ = [
    "BookService",
    "LendingLedger",
    "BorrowerType",
    "BorrowRecord",
    "LibraryServiceError",
    "BookNotFoundError",
    "LendingViolation",
    "NoCopiesAvailableError",
    "InvalidBorrowerTypeError",
    "BorrowerTypeMismatchError",
    "AlreadyBorrowedError",
    "NotBorrowedError",
]
