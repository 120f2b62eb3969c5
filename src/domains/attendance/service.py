# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Attendance service.

This module provides the AttendanceService class for:
- Recording attendance of an existing student in an existing course
- Listing records, optionally filtered by student and/or course
- Updating date, status and notes of a record
- Deleting records

Responses resolve the student to its name and the course to its title.
A record whose student or course was deleted later is returned with
that side null.
"""

import logging
from collections.abc import Sequence

from src.domains.common import EntityNotFoundError, parse_id, present_changes
from src.infrastructure.database.models import Attendance
from src.infrastructure.database.store import SchoolStore
from src.models.attendance import (
    AttendanceCourse,
    AttendanceCreateRequest,
    AttendanceResponse,
    AttendanceStudent,
    AttendanceUpdateRequest,
)
from src.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


class AttendanceNotFoundError(EntityNotFoundError):
    """Raised when attendance record is not found."""

    pass


class AttendanceReferenceError(EntityNotFoundError):
    """Raised when the referenced student or course does not exist."""

    pass


class AttendanceService:
    """Service for managing attendance records.

    Attributes:
        store: Document store.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store

    async def record_attendance(self, request: AttendanceCreateRequest) -> AttendanceResponse:
        """Record attendance of a student in a course.

        Raises:
            InvalidIdentifierError: If the student or course ID is malformed.
            AttendanceReferenceError: If the student or course does not exist.
        """
        student_id = parse_id(request.student_id, "student")
        course_id = parse_id(request.course_id, "course")

        if await self.store.students.find_by_id(student_id) is None:
            raise AttendanceReferenceError("Student not found")
        if await self.store.courses.find_by_id(course_id) is None:
            raise AttendanceReferenceError("Course not found")

        now = utc_now()
        record = await self.store.attendance.insert_one(
            {
                "student_id": student_id,
                "course_id": course_id,
                "date": ensure_utc(request.date) if request.date else now,
                "status": request.status,
                "notes": request.notes,
                "updated_at": now,
            }
        )

        logger.info(
            "Recorded attendance: student=%s, course=%s, status=%s",
            student_id,
            course_id,
            record.status,
        )
        return (await self._to_responses([record]))[0]

    async def list_attendance(
        self,
        student_id: str | None = None,
        course_id: str | None = None,
    ) -> list[AttendanceResponse]:
        """List attendance records, optionally filtered.

        Raises:
            InvalidIdentifierError: If a filter ID is malformed.
        """
        filters: dict[str, str] = {}
        if student_id:
            filters["student_id"] = parse_id(student_id, "student")
        if course_id:
            filters["course_id"] = parse_id(course_id, "course")

        records = await self.store.attendance.find_all(**filters)
        return await self._to_responses(records)

    async def get_attendance(self, attendance_id: str) -> AttendanceResponse:
        """Get an attendance record by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            AttendanceNotFoundError: If record not found.
        """
        record = await self._get_record(attendance_id)
        return (await self._to_responses([record]))[0]

    async def update_attendance(
        self,
        attendance_id: str,
        request: AttendanceUpdateRequest,
    ) -> AttendanceResponse:
        """Update date, status or notes of a record.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            AttendanceNotFoundError: If record not found.
        """
        record = await self._get_record(attendance_id)

        changes = present_changes(request.model_dump(exclude_unset=True), nullable=("notes",))
        if "date" in changes:
            changes["date"] = ensure_utc(changes["date"])
        for field, value in changes.items():
            setattr(record, field, value)
        record.updated_at = utc_now()
        await self.store.attendance.save(record)

        logger.info("Updated attendance: %s", record.id)
        return (await self._to_responses([record]))[0]

    async def delete_attendance(self, attendance_id: str) -> None:
        """Delete an attendance record.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            AttendanceNotFoundError: If record not found.
        """
        record = await self.store.attendance.delete_by_id(
            parse_id(attendance_id, "attendance")
        )
        if record is None:
            raise AttendanceNotFoundError("Attendance record not found")
        logger.info("Deleted attendance: %s", record.id)

    async def _get_record(self, attendance_id: str) -> Attendance:
        record = await self.store.attendance.find_by_id(parse_id(attendance_id, "attendance"))
        if record is None:
            raise AttendanceNotFoundError("Attendance record not found")
        return record

    async def _to_responses(
        self,
        records: Sequence[Attendance],
    ) -> list[AttendanceResponse]:
        students = {
            student.id: AttendanceStudent(
                id=student.id,
                first_name=student.first_name,
                last_name=student.last_name,
            )
            for student in await self.store.students.find_by_ids(
                [record.student_id for record in records]
            )
        }
        courses = {
            course.id: AttendanceCourse(id=course.id, title=course.title)
            for course in await self.store.courses.find_by_ids(
                [record.course_id for record in records]
            )
        }

        return [
            AttendanceResponse(
                id=record.id,
                created_at=record.created_at,
                student_id=record.student_id,
                course_id=record.course_id,
                student=students.get(record.student_id),
                course=courses.get(record.course_id),
                date=record.date,
                status=record.status,
                notes=record.notes,
                updated_at=record.updated_at,
            )
            for record in records
        ]
