# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student service.

This module provides the StudentService class for:
- Student creation (single or batch), linked to instructors teaching
  their favorite subject
- Student retrieval with instructors resolved to display fields
- Student updates, relinking instructors from the new favorite subject
- Student deletion, stripping the id from instructors and courses
"""

import logging
from collections.abc import Sequence

from src.domains.cascade.service import CascadeDeleter
from src.domains.common import (
    EntityNotFoundError,
    parse_id,
    present_changes,
    to_person_summaries,
)
from src.domains.relationships.links import STUDENT_INSTRUCTORS
from src.domains.relationships.synchronizer import RelationshipSynchronizer
from src.infrastructure.database.models import Instructor, Student
from src.infrastructure.database.store import SchoolStore
from src.models.student import (
    StudentCreateRequest,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)


class StudentNotFoundError(EntityNotFoundError):
    """Raised when student is not found."""

    pass


class StudentService:
    """Service for managing students.

    Attributes:
        store: Document store.
        synchronizer: Relinks students to instructors on every write.
        cascade: Strips a deleted student's id from other collections.
    """

    def __init__(self, store: SchoolStore) -> None:
        """Initialize student service.

        Args:
            store: Document store bound to the request's session.
        """
        self.store = store
        self.synchronizer = RelationshipSynchronizer(store)
        self.cascade = CascadeDeleter(store)

    async def create_students(
        self,
        requests: Sequence[StudentCreateRequest],
    ) -> list[StudentResponse]:
        """Create one or more students.

        The batch is inserted in a single commit, then each student is
        linked to its instructors in turn.

        Args:
            requests: Students to create.

        Returns:
            Created students, in request order.
        """
        students = await self.store.students.insert_many(
            [request.model_dump() for request in requests]
        )
        await self.synchronizer.on_created_many(students, STUDENT_INSTRUCTORS)

        logger.info("Created %d student(s)", len(students))
        return await self._to_responses(students)

    async def list_students(self) -> list[StudentResponse]:
        """List all students."""
        students = await self.store.students.find_all()
        return await self._to_responses(students)

    async def get_student(self, student_id: str) -> StudentResponse:
        """Get a student by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            StudentNotFoundError: If student not found.
        """
        student = await self._get_student(student_id)
        return (await self._to_responses([student]))[0]

    async def update_student(
        self,
        student_id: str,
        request: StudentUpdateRequest,
    ) -> StudentResponse:
        """Update a student and relink its instructors.

        Args:
            student_id: Student identifier.
            request: Fields to change.

        Returns:
            Updated student.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            StudentNotFoundError: If student not found.
        """
        student = await self._get_student(student_id)

        for field, value in present_changes(request.model_dump(exclude_unset=True)).items():
            setattr(student, field, value)
        await self.store.students.save(student)

        await self.synchronizer.on_updated(student, STUDENT_INSTRUCTORS)

        logger.info("Updated student: %s", student.id)
        return (await self._to_responses([student]))[0]

    async def delete_student(self, student_id: str) -> None:
        """Delete a student and strip its id from instructors and courses.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            StudentNotFoundError: If student not found.
        """
        student = await self.store.students.delete_by_id(parse_id(student_id, "student"))
        if student is None:
            raise StudentNotFoundError("Student not found")

        await self.cascade.strip_references(self.store.students.name, student.id)
        logger.info("Deleted student: %s", student.id)

    async def _get_student(self, student_id: str) -> Student:
        student = await self.store.students.find_by_id(parse_id(student_id, "student"))
        if student is None:
            raise StudentNotFoundError("Student not found")
        return student

    async def _to_responses(self, students: Sequence[Student]) -> list[StudentResponse]:
        """Convert students to response DTOs, resolving instructors in one lookup."""
        instructor_ids = [i for student in students for i in (student.instructors or [])]
        instructors: dict[str, Instructor] = {
            instructor.id: instructor
            for instructor in await self.store.instructors.find_by_ids(instructor_ids)
        }

        return [
            StudentResponse(
                id=student.id,
                created_at=student.created_at,
                first_name=student.first_name,
                last_name=student.last_name,
                gender=student.gender,
                age=student.age,
                favorite_subject=student.favorite_subject,
                grade=student.grade,
                email=student.email,
                instructors=to_person_summaries(
                    [instructors[i] for i in (student.instructors or []) if i in instructors]
                ),
                courses=list(student.courses or []),
            )
            for student in students
        ]
