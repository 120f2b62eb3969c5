# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- An in-memory document store with the same interface as SchoolStore
- Factories for students, instructors, courses and books
- Sample identifiers
"""

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from src.infrastructure.database.connection import DatabaseError
from src.infrastructure.database.models import (
    Attendance,
    Book,
    Course,
    Instructor,
    Player,
    Student,
)
from src.infrastructure.database.models.base import new_id
from src.infrastructure.database.store import set_add, set_pull
from src.utils.datetime import utc_now


# =============================================================================
# In-memory document store
# =============================================================================


class InMemoryCollection:
    """Dict-backed collection mirroring DocumentCollection.

    Documents are real model instances kept in insertion order. Any
    operation listed in ``failing`` raises DatabaseError, which lets
    tests exercise partial-failure paths.
    """

    def __init__(self, model: type) -> None:
        self.model = model
        self.documents: dict[str, Any] = {}
        self.failing: set[str] = set()
        self.calls: list[tuple[str, Any]] = []

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def is_reference_list(self, field: str) -> bool:
        return field in self.model.__reference_lists__

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise DatabaseError(f"Failed to {operation} {self.name}")

    def _build(self, values: Mapping[str, Any]) -> Any:
        document = self.model(**dict(values))
        for column in self.model.__table__.columns:
            if getattr(document, column.key, None) is not None or column.default is None:
                continue
            default = column.default
            value = default.arg(None) if default.is_callable else default.arg
            setattr(document, column.key, value)
        if document.id is None:
            document.id = new_id()
        if document.created_at is None:
            document.created_at = utc_now()
        return document

    def _matches(self, document: Any, filters: Mapping[str, Any]) -> bool:
        for field, value in filters.items():
            current = getattr(document, field)
            if self.is_reference_list(field):
                if value not in (current or []):
                    return False
            elif isinstance(value, (list, tuple, set, frozenset)):
                if current not in value:
                    return False
            elif current != value:
                return False
        return True

    async def insert_one(self, values: Mapping[str, Any]) -> Any:
        return (await self.insert_many([values]))[0]

    async def insert_many(self, items: Sequence[Mapping[str, Any]]) -> list[Any]:
        self._check("insert")
        documents = [self._build(values) for values in items]
        for document in documents:
            self.documents[document.id] = document
        return documents

    async def find_all(self, **filters: Any) -> list[Any]:
        self._check("find")
        return [doc for doc in self.documents.values() if self._matches(doc, filters)]

    async def find_by_id(self, doc_id: str) -> Any | None:
        self._check("find")
        return self.documents.get(doc_id)

    async def find_by_ids(self, ids: Sequence[str]) -> list[Any]:
        self._check("find")
        return [self.documents[doc_id] for doc_id in ids if doc_id in self.documents]

    async def save(self, document: Any) -> Any:
        self._check("save")
        self.calls.append(("save", document.id))
        self.documents[document.id] = document
        return document

    async def update_many(
        self,
        filters: Mapping[str, Any],
        *,
        add_to_set: Mapping[str, str] | None = None,
        pull: Mapping[str, str] | None = None,
    ) -> int:
        self._check("update")
        self.calls.append(("update_many", dict(filters)))
        modified = 0
        for document in await self.find_all(**filters):
            changed = False
            for field, value in (pull or {}).items():
                updated = set_pull(getattr(document, field), value)
                if updated != list(getattr(document, field) or []):
                    setattr(document, field, updated)
                    changed = True
            for field, value in (add_to_set or {}).items():
                updated = set_add(getattr(document, field), value)
                if updated != list(getattr(document, field) or []):
                    setattr(document, field, updated)
                    changed = True
            modified += changed
        return modified

    async def delete_by_id(self, doc_id: str) -> Any | None:
        self._check("delete")
        return self.documents.pop(doc_id, None)


class InMemorySchoolStore:
    """In-memory stand-in for SchoolStore."""

    def __init__(self) -> None:
        self.students = InMemoryCollection(Student)
        self.instructors = InMemoryCollection(Instructor)
        self.courses = InMemoryCollection(Course)
        self.books = InMemoryCollection(Book)
        self.players = InMemoryCollection(Player)
        self.attendance = InMemoryCollection(Attendance)

    def collection(self, name: str) -> InMemoryCollection:
        collection = getattr(self, name, None)
        if not isinstance(collection, InMemoryCollection):
            raise KeyError(name)
        return collection


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store() -> InMemorySchoolStore:
    """Provide an empty in-memory document store."""
    return InMemorySchoolStore()


@pytest.fixture
def make_student(store: InMemorySchoolStore):
    """Insert a student directly, bypassing relationship synchronization."""

    async def factory(**overrides: Any) -> Student:
        values = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "gender": "Female",
            "age": 17,
            "favorite_subject": "Math",
            "grade": "12",
            "email": "ada@example.com",
        }
        values.update(overrides)
        return await store.students.insert_one(values)

    return factory


@pytest.fixture
def make_instructor(store: InMemorySchoolStore):
    """Insert an instructor directly, bypassing relationship synchronization."""

    async def factory(**overrides: Any) -> Instructor:
        values = {
            "first_name": "Alan",
            "last_name": "Turing",
            "course": "Math",
            "gender": "Male",
            "age": 41,
            "email": "alan@example.com",
            "qualification": "PhD",
        }
        values.update(overrides)
        return await store.instructors.insert_one(values)

    return factory


@pytest.fixture
def make_course(store: InMemorySchoolStore):
    """Insert a course directly, bypassing relationship synchronization."""

    async def factory(**overrides: Any) -> Course:
        values = {
            "course_code": "MATH101",
            "title": "Calculus I",
            "department": "Math",
            "schedule": "Mon 9:00",
            "room": "B12",
            "credits": 4,
        }
        values.update(overrides)
        return await store.courses.insert_one(values)

    return factory


@pytest.fixture
def make_book(store: InMemorySchoolStore):
    """Insert a book with no active borrows."""

    async def factory(**overrides: Any) -> Book:
        values = {
            "book_title": "Structure and Interpretation of Computer Programs",
            "author": "Abelson",
            "publisher": "MIT Press",
            "publication_year": 1985,
            "shelve_location": "A1",
            "genre": "Computer Science",
            "copies_available": 3,
            "borrowed_by": [],
        }
        values.update(overrides)
        return await store.books.insert_one(values)

    return factory


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def missing_id() -> str:
    """Provide a well-formed ID that matches no document."""
    return "550e8400-e29b-41d4-a716-446655440000"
