# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for DocumentCollection and SchoolStore.

The SQLAlchemy session is mocked; these tests cover filter handling,
set-add / pull patching and error wrapping.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.infrastructure.database.connection import DatabaseError
from src.infrastructure.database.models import Instructor, Student
from src.infrastructure.database.store import (
    DocumentCollection,
    SchoolStore,
    set_add,
    set_pull,
)


@pytest.fixture
def mock_db() -> MagicMock:
    """Create mock database session."""
    db = MagicMock()
    db.execute = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.delete = AsyncMock()
    return db


def _result(documents: list) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = documents
    result.scalar_one_or_none.return_value = documents[0] if documents else None
    return result


def _instructor(doc_id: str, course: str = "Math", students: list | None = None) -> Instructor:
    return Instructor(
        id=doc_id,
        first_name="Alan",
        last_name="Turing",
        course=course,
        gender="Male",
        age=41,
        email="alan@example.com",
        qualification="PhD",
        students=students or [],
        courses=[],
    )


class TestSetOperations:
    """Tests for set_add and set_pull."""

    def test_set_add_appends_once(self) -> None:
        assert set_add(["a"], "b") == ["a", "b"]
        assert set_add(["a", "b"], "a") == ["a", "b"]
        assert set_add(None, "a") == ["a"]

    def test_set_pull_removes_all(self) -> None:
        assert set_pull(["a", "b", "a"], "a") == ["b"]
        assert set_pull(None, "a") == []


class TestDocumentCollection:
    """Tests for DocumentCollection."""

    def test_name_and_reference_lists(self, mock_db) -> None:
        collection = DocumentCollection(mock_db, Student)

        assert collection.name == "students"
        assert collection.is_reference_list("instructors") is True
        assert collection.is_reference_list("favorite_subject") is False

    @pytest.mark.asyncio
    async def test_insert_many_commits_once(self, mock_db) -> None:
        collection = DocumentCollection(mock_db, Instructor)

        documents = await collection.insert_many(
            [{"first_name": "A", "course": "Math"}, {"first_name": "B", "course": "Art"}]
        )

        assert [d.first_name for d in documents] == ["A", "B"]
        mock_db.add_all.assert_called_once()
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reference_list_filter_matches_membership(self, mock_db) -> None:
        holder = _instructor("i1", students=["s1"])
        other = _instructor("i2", students=["s2"])
        mock_db.execute.return_value = _result([holder, other])
        collection = DocumentCollection(mock_db, Instructor)

        found = await collection.find_all(students="s1")

        assert found == [holder]

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, mock_db) -> None:
        collection = DocumentCollection(mock_db, Instructor)

        with pytest.raises(ValueError, match="Unknown field"):
            await collection.find_all(nickname="x")

    @pytest.mark.asyncio
    async def test_find_by_ids_preserves_order_and_skips_missing(self, mock_db) -> None:
        first = _instructor("i1")
        second = _instructor("i2")
        mock_db.execute.return_value = _result([first, second])
        collection = DocumentCollection(mock_db, Instructor)

        found = await collection.find_by_ids(["i2", "missing", "i1"])

        assert found == [second, first]

    @pytest.mark.asyncio
    async def test_find_by_ids_empty_skips_query(self, mock_db) -> None:
        collection = DocumentCollection(mock_db, Instructor)

        assert await collection.find_by_ids([]) == []
        mock_db.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_many_counts_modified_documents(self, mock_db) -> None:
        already = _instructor("i1", students=["s1"])
        fresh = _instructor("i2")
        mock_db.execute.return_value = _result([already, fresh])
        collection = DocumentCollection(mock_db, Instructor)

        modified = await collection.update_many(
            {"id": ["i1", "i2"]},
            add_to_set={"students": "s1"},
        )

        assert modified == 1
        assert already.students == ["s1"]
        assert fresh.students == ["s1"]
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_many_pull(self, mock_db) -> None:
        holder = _instructor("i1", students=["s1", "s2"])
        mock_db.execute.return_value = _result([holder])
        collection = DocumentCollection(mock_db, Instructor)

        modified = await collection.update_many({"id": ["i1"]}, pull={"students": "s1"})

        assert modified == 1
        assert holder.students == ["s2"]

    @pytest.mark.asyncio
    async def test_update_many_without_changes_skips_commit(self, mock_db) -> None:
        mock_db.execute.return_value = _result([_instructor("i1")])
        collection = DocumentCollection(mock_db, Instructor)

        modified = await collection.update_many({"id": ["i1"]}, pull={"students": "s9"})

        assert modified == 0
        mock_db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_many_rejects_scalar_field(self, mock_db) -> None:
        collection = DocumentCollection(mock_db, Instructor)

        with pytest.raises(ValueError, match="not a reference list"):
            await collection.update_many({}, add_to_set={"course": "Math"})

    @pytest.mark.asyncio
    async def test_delete_missing_returns_none(self, mock_db) -> None:
        mock_db.execute.return_value = _result([])
        collection = DocumentCollection(mock_db, Instructor)

        assert await collection.delete_by_id("i1") is None
        mock_db.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_failure_is_wrapped(self, mock_db) -> None:
        mock_db.commit.side_effect = OperationalError("COMMIT", {}, Exception("gone"))
        collection = DocumentCollection(mock_db, Student)

        with pytest.raises(DatabaseError, match="Failed to save students document"):
            await collection.save(Student(id="s1"))

        mock_db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_query_failure_is_wrapped(self, mock_db) -> None:
        mock_db.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        collection = DocumentCollection(mock_db, Student)

        with pytest.raises(DatabaseError, match="Failed to query students"):
            await collection.find_all()


class TestSchoolStore:
    """Tests for SchoolStore."""

    def test_collection_lookup(self, mock_db) -> None:
        store = SchoolStore(mock_db)

        assert store.collection("students") is store.students
        assert store.collection("books").model.__tablename__ == "books"

    def test_unknown_collection(self, mock_db) -> None:
        store = SchoolStore(mock_db)

        with pytest.raises(KeyError):
            store.collection("db")
