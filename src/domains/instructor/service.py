# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Instructor service.

This module provides the InstructorService class for:
- Instructor creation (single or batch), linked to students whose
  favorite subject is the course taught
- Instructor retrieval with students resolved to display fields
- Instructor updates, relinking students from the new course
- Instructor deletion, stripping the id from students and courses
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
from src.domains.relationships.links import INSTRUCTOR_STUDENTS
from src.domains.relationships.synchronizer import RelationshipSynchronizer
from src.infrastructure.database.models import Instructor, Student
from src.infrastructure.database.store import SchoolStore
from src.models.instructor import (
    InstructorCreateRequest,
    InstructorResponse,
    InstructorUpdateRequest,
)

logger = logging.getLogger(__name__)


class InstructorNotFoundError(EntityNotFoundError):
    """Raised when instructor is not found."""

    pass


class InstructorService:
    """Service for managing instructors.

    Attributes:
        store: Document store.
        synchronizer: Relinks instructors to students on every write.
        cascade: Strips a deleted instructor's id from other collections.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store
        self.synchronizer = RelationshipSynchronizer(store)
        self.cascade = CascadeDeleter(store)

    async def create_instructors(
        self,
        requests: Sequence[InstructorCreateRequest],
    ) -> list[InstructorResponse]:
        """Create one or more instructors and link each to its students."""
        instructors = await self.store.instructors.insert_many(
            [request.model_dump() for request in requests]
        )
        await self.synchronizer.on_created_many(instructors, INSTRUCTOR_STUDENTS)

        logger.info("Created %d instructor(s)", len(instructors))
        return await self._to_responses(instructors)

    async def list_instructors(self) -> list[InstructorResponse]:
        """List all instructors."""
        instructors = await self.store.instructors.find_all()
        return await self._to_responses(instructors)

    async def get_instructor(self, instructor_id: str) -> InstructorResponse:
        """Get an instructor by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            InstructorNotFoundError: If instructor not found.
        """
        instructor = await self._get_instructor(instructor_id)
        return (await self._to_responses([instructor]))[0]

    async def update_instructor(
        self,
        instructor_id: str,
        request: InstructorUpdateRequest,
    ) -> InstructorResponse:
        """Update an instructor and relink its students.

        Course links are not touched here; they are recomputed when a
        course is written.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            InstructorNotFoundError: If instructor not found.
        """
        instructor = await self._get_instructor(instructor_id)

        for field, value in present_changes(request.model_dump(exclude_unset=True)).items():
            setattr(instructor, field, value)
        await self.store.instructors.save(instructor)

        await self.synchronizer.on_updated(instructor, INSTRUCTOR_STUDENTS)

        logger.info("Updated instructor: %s", instructor.id)
        return (await self._to_responses([instructor]))[0]

    async def delete_instructor(self, instructor_id: str) -> None:
        """Delete an instructor and strip its id from students and courses.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            InstructorNotFoundError: If instructor not found.
        """
        instructor = await self.store.instructors.delete_by_id(
            parse_id(instructor_id, "instructor")
        )
        if instructor is None:
            raise InstructorNotFoundError("Instructor not found")

        await self.cascade.strip_references(self.store.instructors.name, instructor.id)
        logger.info("Deleted instructor: %s", instructor.id)

    async def _get_instructor(self, instructor_id: str) -> Instructor:
        instructor = await self.store.instructors.find_by_id(
            parse_id(instructor_id, "instructor")
        )
        if instructor is None:
            raise InstructorNotFoundError("Instructor not found")
        return instructor

    async def _to_responses(
        self,
        instructors: Sequence[Instructor],
    ) -> list[InstructorResponse]:
        student_ids = [s for instructor in instructors for s in (instructor.students or [])]
        students: dict[str, Student] = {
            student.id: student
            for student in await self.store.students.find_by_ids(student_ids)
        }

        return [
            InstructorResponse(
                id=instructor.id,
                created_at=instructor.created_at,
                first_name=instructor.first_name,
                last_name=instructor.last_name,
                course=instructor.course,
                gender=instructor.gender,
                age=instructor.age,
                email=instructor.email,
                qualification=instructor.qualification,
                students=to_person_summaries(
                    [students[s] for s in (instructor.students or []) if s in students]
                ),
                courses=list(instructor.courses or []),
            )
            for instructor in instructors
        ]
