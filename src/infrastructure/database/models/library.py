# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Library collection.

A book carries its own lending state: ``copies_available`` and the
``borrowed_by`` list of active borrows, each stored as
``{"borrower_id": <id>, "borrower_type": "Student" | "Instructor"}``.
"""

from typing import Any

from sqlalchemy import JSON, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.models.base import Base, DocumentMixin


class Book(DocumentMixin, Base):
    """Book document with embedded borrow records."""

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("copies_available >= 0", name="ck_books_copies_available"),
    )

    book_title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    publisher: Mapped[str] = mapped_column(String(200), nullable=False)
    publication_year: Mapped[int] = mapped_column(Integer, nullable=False)
    shelve_location: Mapped[str] = mapped_column(String(50), nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    copies_available: Mapped[int] = mapped_column(Integer, nullable=False)
    borrowed_by: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list, nullable=False)
