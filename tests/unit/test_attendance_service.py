# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for AttendanceService."""

from datetime import datetime, timezone

import pytest

from src.domains.attendance.service import (
    AttendanceNotFoundError,
    AttendanceReferenceError,
    AttendanceService,
)
from src.domains.common import InvalidIdentifierError
from src.models.attendance import AttendanceCreateRequest, AttendanceUpdateRequest


@pytest.fixture
def service(store) -> AttendanceService:
    return AttendanceService(store)


class TestRecordAttendance:
    """Tests for recording attendance."""

    @pytest.mark.asyncio
    async def test_records_and_resolves_references(
        self, service, make_student, make_course
    ) -> None:
        student = await make_student(first_name="Ada")
        course = await make_course(title="Calculus I")

        response = await service.record_attendance(
            AttendanceCreateRequest(student_id=student.id, course_id=course.id, status="Present")
        )

        assert response.status == "Present"
        assert response.student.first_name == "Ada"
        assert response.course.title == "Calculus I"
        assert response.date.tzinfo is not None

    @pytest.mark.asyncio
    async def test_naive_date_is_utc(self, service, make_student, make_course) -> None:
        student = await make_student()
        course = await make_course()

        response = await service.record_attendance(
            AttendanceCreateRequest(
                student_id=student.id,
                course_id=course.id,
                status="Late",
                date=datetime(2025, 3, 1, 9, 0),
            )
        )

        assert response.date == datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_missing_student(self, service, make_course, missing_id) -> None:
        course = await make_course()

        with pytest.raises(AttendanceReferenceError, match="Student not found"):
            await service.record_attendance(
                AttendanceCreateRequest(student_id=missing_id, course_id=course.id, status="Absent")
            )

    @pytest.mark.asyncio
    async def test_malformed_course_id(self, service, make_student) -> None:
        student = await make_student()

        with pytest.raises(InvalidIdentifierError, match="Invalid course ID"):
            await service.record_attendance(
                AttendanceCreateRequest(student_id=student.id, course_id="x", status="Absent")
            )


class TestListAndUpdate:
    """Tests for listing, updating and deleting attendance."""

    @pytest.mark.asyncio
    async def test_filters_by_student(self, service, make_student, make_course) -> None:
        ada = await make_student()
        bob = await make_student(first_name="Bob", email="bob@example.com")
        course = await make_course()
        for student in (ada, bob):
            await service.record_attendance(
                AttendanceCreateRequest(student_id=student.id, course_id=course.id, status="Present")
            )

        records = await service.list_attendance(student_id=bob.id)

        assert [r.student_id for r in records] == [bob.id]
        assert len(await service.list_attendance(course_id=course.id)) == 2

    @pytest.mark.asyncio
    async def test_update_status(self, service, make_student, make_course) -> None:
        student = await make_student()
        course = await make_course()
        created = await service.record_attendance(
            AttendanceCreateRequest(student_id=student.id, course_id=course.id, status="Absent")
        )

        updated = await service.update_attendance(
            created.id, AttendanceUpdateRequest(status="Late", notes="Bus delay")
        )

        assert updated.status == "Late"
        assert updated.notes == "Bus delay"
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_explicit_null_clears_notes(self, service, make_student, make_course) -> None:
        student = await make_student()
        course = await make_course()
        created = await service.record_attendance(
            AttendanceCreateRequest(
                student_id=student.id, course_id=course.id, status="Late", notes="Bus delay"
            )
        )

        updated = await service.update_attendance(
            created.id, AttendanceUpdateRequest(status=None, notes=None)
        )

        assert updated.notes is None
        assert updated.status == "Late"

    @pytest.mark.asyncio
    async def test_delete_missing(self, service, missing_id) -> None:
        with pytest.raises(AttendanceNotFoundError, match="Attendance record not found"):
            await service.delete_attendance(missing_id)
