# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course service.

This module provides the CourseService class for:
- Course creation (single or batch), linked to the instructors teaching
  and the students favoring the course's department
- Course retrieval with instructors and students resolved
- Course updates, relinking both lists from the new department
- Course deletion, stripping the id from instructors and students
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
from src.domains.relationships.links import COURSE_INSTRUCTORS, COURSE_STUDENTS
from src.domains.relationships.synchronizer import RelationshipSynchronizer
from src.infrastructure.database.models import Course
from src.infrastructure.database.store import SchoolStore
from src.models.course import CourseCreateRequest, CourseResponse, CourseUpdateRequest

logger = logging.getLogger(__name__)

# Links recomputed whenever a course is written, in this order
COURSE_LINKS = (COURSE_INSTRUCTORS, COURSE_STUDENTS)


class CourseNotFoundError(EntityNotFoundError):
    """Raised when course is not found."""

    pass


class CourseService:
    """Service for managing courses.

    Attributes:
        store: Document store.
        synchronizer: Relinks courses to instructors and students.
        cascade: Strips a deleted course's id from other collections.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store
        self.synchronizer = RelationshipSynchronizer(store)
        self.cascade = CascadeDeleter(store)

    async def create_courses(
        self,
        requests: Sequence[CourseCreateRequest],
    ) -> list[CourseResponse]:
        """Create one or more courses and link each by department."""
        courses = await self.store.courses.insert_many(
            [request.model_dump() for request in requests]
        )
        for course in courses:
            for link in COURSE_LINKS:
                await self.synchronizer.on_created(course, link)

        logger.info("Created %d course(s)", len(courses))
        return await self._to_responses(courses)

    async def list_courses(self) -> list[CourseResponse]:
        """List all courses."""
        courses = await self.store.courses.find_all()
        return await self._to_responses(courses)

    async def get_course(self, course_id: str) -> CourseResponse:
        """Get a course by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            CourseNotFoundError: If course not found.
        """
        course = await self._get_course(course_id)
        return (await self._to_responses([course]))[0]

    async def update_course(
        self,
        course_id: str,
        request: CourseUpdateRequest,
    ) -> CourseResponse:
        """Update a course and relink instructors and students.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            CourseNotFoundError: If course not found.
        """
        course = await self._get_course(course_id)

        for field, value in present_changes(request.model_dump(exclude_unset=True)).items():
            setattr(course, field, value)
        await self.store.courses.save(course)

        for link in COURSE_LINKS:
            await self.synchronizer.on_updated(course, link)

        logger.info("Updated course: %s", course.id)
        return (await self._to_responses([course]))[0]

    async def delete_course(self, course_id: str) -> None:
        """Delete a course and strip its id from instructors and students.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            CourseNotFoundError: If course not found.
        """
        course = await self.store.courses.delete_by_id(parse_id(course_id, "course"))
        if course is None:
            raise CourseNotFoundError("Course not found")

        await self.cascade.strip_references(self.store.courses.name, course.id)
        logger.info("Deleted course: %s", course.id)

    async def _get_course(self, course_id: str) -> Course:
        course = await self.store.courses.find_by_id(parse_id(course_id, "course"))
        if course is None:
            raise CourseNotFoundError("Course not found")
        return course

    async def _to_responses(self, courses: Sequence[Course]) -> list[CourseResponse]:
        instructors = {
            instructor.id: instructor
            for instructor in await self.store.instructors.find_by_ids(
                [i for course in courses for i in (course.instructors or [])]
            )
        }
        students = {
            student.id: student
            for student in await self.store.students.find_by_ids(
                [s for course in courses for s in (course.students or [])]
            )
        }

        return [
            CourseResponse(
                id=course.id,
                created_at=course.created_at,
                course_code=course.course_code,
                title=course.title,
                department=course.department,
                schedule=course.schedule,
                room=course.room,
                credits=course.credits,
                instructors=to_person_summaries(
                    [instructors[i] for i in (course.instructors or []) if i in instructors]
                ),
                students=to_person_summaries(
                    [students[s] for s in (course.students or []) if s in students]
                ),
            )
            for course in courses
        ]
