# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Document-collection store over SQLAlchemy async sessions.

Each table is exposed as a collection of documents with the operations the
domain services rely on:

- ``insert_one`` / ``insert_many``
- ``find_all(**filters)``, ``find_by_id``, ``find_by_ids``
- ``save``
- ``update_many(filters, add_to_set=..., pull=...)``
- ``delete_by_id``

Filter semantics follow document-store conventions. A scalar value on a
scalar field is an equality test, a list value on a scalar field is a
membership test (``$in``), and a scalar value on a reference-list field
matches documents whose list contains it.

Every write commits on its own. There is no transaction spanning several
calls, so a sequence of writes that fails midway keeps the steps already
applied.

Example:
    store = SchoolStore(session)
    maths = await store.instructors.find_all(course="Math")
    await store.instructors.update_many(
        {"id": [i.id for i in maths]},
        add_to_set={"students": student.id},
    )
"""

import logging
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.connection import DatabaseError
from src.infrastructure.database.models import (
    Attendance,
    Base,
    Book,
    Course,
    Instructor,
    Player,
    Student,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def set_add(values: Sequence[str] | None, item: str) -> list[str]:
    """Append ``item`` unless already present (``$addToSet``)."""
    current = list(values or [])
    if item not in current:
        current.append(item)
    return current


def set_pull(values: Sequence[str] | None, item: str) -> list[str]:
    """Remove every occurrence of ``item`` (``$pull``)."""
    return [value for value in (values or []) if value != item]


class DocumentCollection(Generic[ModelT]):
    """Collection of documents backed by one SQLAlchemy model.

    Attributes:
        db: Async database session.
        model: Mapped model class of the collection.
    """

    def __init__(self, db: AsyncSession, model: type[ModelT]) -> None:
        self.db = db
        self.model = model

    @property
    def name(self) -> str:
        """Collection (table) name."""
        return self.model.__tablename__

    def is_reference_list(self, field: str) -> bool:
        """Whether ``field`` is a JSON list of document ids."""
        return field in self.model.__reference_lists__

    async def insert_one(self, values: Mapping[str, Any]) -> ModelT:
        """Insert a single document."""
        documents = await self.insert_many([values])
        return documents[0]

    async def insert_many(self, items: Iterable[Mapping[str, Any]]) -> list[ModelT]:
        """Insert several documents in one commit.

        A failure aborts the whole batch; nothing from it is persisted.

        Args:
            items: Field values of each new document.

        Returns:
            The inserted documents, in input order.

        Raises:
            DatabaseError: If the insert fails.
        """
        documents = [self.model(**dict(values)) for values in items]
        self.db.add_all(documents)
        await self._commit(f"insert into {self.name}")

        logger.debug("Inserted %d document(s) into %s", len(documents), self.name)
        return documents

    async def find_all(self, **filters: Any) -> list[ModelT]:
        """Find documents matching every filter, in insertion order."""
        query = select(self.model)
        contains: dict[str, Any] = {}

        for field, value in filters.items():
            column = self._column(field)
            if self.is_reference_list(field):
                contains[field] = value
            elif isinstance(value, (list, tuple, set, frozenset)):
                query = query.where(column.in_(list(value)))
            else:
                query = query.where(column == value)

        query = query.order_by(self.model.created_at, self.model.id)
        result = await self._execute(query)
        documents = list(result.scalars().all())

        if contains:
            documents = [
                doc
                for doc in documents
                if all(value in (getattr(doc, field) or []) for field, value in contains.items())
            ]
        return documents

    async def find_by_id(self, doc_id: str) -> ModelT | None:
        """Get a document by id, or None when absent."""
        query = select(self.model).where(self.model.id == doc_id)
        result = await self._execute(query)
        return result.scalar_one_or_none()

    async def find_by_ids(self, ids: Sequence[str]) -> list[ModelT]:
        """Resolve a reference list, keeping its order and skipping dangling ids."""
        if not ids:
            return []

        query = select(self.model).where(self.model.id.in_(list(dict.fromkeys(ids))))
        result = await self._execute(query)
        by_id = {doc.id: doc for doc in result.scalars().all()}
        return [by_id[doc_id] for doc_id in ids if doc_id in by_id]

    async def save(self, document: ModelT) -> ModelT:
        """Persist a new or modified document."""
        self.db.add(document)
        await self._commit(f"save {self.name} document")
        return document

    async def update_many(
        self,
        filters: Mapping[str, Any],
        *,
        add_to_set: Mapping[str, str] | None = None,
        pull: Mapping[str, str] | None = None,
    ) -> int:
        """Apply set-add / pull patches to every matching document.

        Args:
            filters: Selection, same semantics as :meth:`find_all`.
            add_to_set: Reference-list field -> id to add if absent.
            pull: Reference-list field -> id to remove.

        Returns:
            Number of documents actually modified.

        Raises:
            ValueError: If a patched field is not a reference list.
            DatabaseError: If the query or the commit fails.
        """
        add_to_set = dict(add_to_set or {})
        pull = dict(pull or {})
        for field in (*add_to_set, *pull):
            if not self.is_reference_list(field):
                raise ValueError(f"{self.name}.{field} is not a reference list")

        modified = 0
        for document in await self.find_all(**filters):
            changed = False
            for field, value in pull.items():
                current = getattr(document, field) or []
                updated = set_pull(current, value)
                if updated != list(current):
                    setattr(document, field, updated)
                    changed = True
            for field, value in add_to_set.items():
                current = getattr(document, field) or []
                updated = set_add(current, value)
                if updated != list(current):
                    setattr(document, field, updated)
                    changed = True
            if changed:
                modified += 1

        if modified:
            await self._commit(f"update {self.name}")

        logger.debug("Updated %d document(s) in %s", modified, self.name)
        return modified

    async def delete_by_id(self, doc_id: str) -> ModelT | None:
        """Delete a document by id.

        Returns:
            The deleted document, or None if it did not exist.
        """
        document = await self.find_by_id(doc_id)
        if document is None:
            return None

        await self.db.delete(document)
        await self._commit(f"delete from {self.name}")
        return document

    def _column(self, field: str) -> Any:
        if field not in self.model.__table__.columns:
            raise ValueError(f"Unknown field {field!r} for {self.name}")
        return getattr(self.model, field)

    async def _execute(self, query: Select[Any]) -> Any:
        try:
            return await self.db.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to query {self.name}", e) from e

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(f"Failed to {action}", e) from e


class SchoolStore:
    """All collections of the school records database on one session.

    Attributes:
        students: Student collection.
        instructors: Instructor collection.
        courses: Course collection.
        books: Library book collection.
        players: Player collection.
        attendance: Attendance collection.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.students = DocumentCollection(db, Student)
        self.instructors = DocumentCollection(db, Instructor)
        self.courses = DocumentCollection(db, Course)
        self.books = DocumentCollection(db, Book)
        self.players = DocumentCollection(db, Player)
        self.attendance = DocumentCollection(db, Attendance)

    def collection(self, name: str) -> DocumentCollection[Any]:
        """Look up a collection by name.

        Raises:
            KeyError: If no collection has that name.
        """
        collection = getattr(self, name, None)
        if not isinstance(collection, DocumentCollection):
            raise KeyError(name)
        return collection
