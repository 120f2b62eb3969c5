# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy models for the school records database."""

from src.infrastructure.database.models.base import Base, DocumentMixin, TimestampMixin, new_id
from src.infrastructure.database.models.library import Book
from src.infrastructure.database.models.school import (
    Attendance,
    Course,
    Instructor,
    Player,
    Student,
)

__all__ = [
    "Base",
    "DocumentMixin",
    "TimestampMixin",
    "new_id",
    "Student",
    "Instructor",
    "Course",
    "Player",
    "Attendance",
    "Book",
]
