# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for CascadeDeleter."""

import pytest

from src.domains.cascade.service import CascadeDeleter
from src.infrastructure.database.connection import DatabaseError


@pytest.fixture
def cascade(store) -> CascadeDeleter:
    return CascadeDeleter(store)


class TestStripReferences:
    """Tests for CascadeDeleter.strip_references."""

    @pytest.mark.asyncio
    async def test_strips_student_from_instructors_and_courses(
        self, store, cascade, make_instructor, make_course
    ) -> None:
        sid = "550e8400-e29b-41d4-a716-446655440001"
        instructor = await make_instructor(students=[sid, "other"])
        course = await make_course(students=[sid])
        untouched = await make_course(students=["other"], course_code="ART1")

        modified = await cascade.strip_references("students", sid)

        assert modified == 2
        assert instructor.students == ["other"]
        assert course.students == []
        assert untouched.students == ["other"]

    @pytest.mark.asyncio
    async def test_strips_course_from_instructors_and_students(
        self, cascade, make_instructor, make_student
    ) -> None:
        cid = "550e8400-e29b-41d4-a716-446655440002"
        instructor = await make_instructor(courses=[cid])
        student = await make_student(courses=[cid])

        await cascade.strip_references("courses", cid)

        assert instructor.courses == []
        assert student.courses == []

    @pytest.mark.asyncio
    async def test_no_references_modifies_nothing(self, cascade, make_student) -> None:
        await make_student()

        assert await cascade.strip_references("instructors", "nobody") == 0

    @pytest.mark.asyncio
    async def test_attempts_all_removals_before_raising(
        self, store, cascade, make_course
    ) -> None:
        """A failing collection does not stop the others; the failure surfaces."""
        sid = "550e8400-e29b-41d4-a716-446655440001"
        course = await make_course(students=[sid])
        store.instructors.failing.add("update")

        with pytest.raises(DatabaseError):
            await cascade.strip_references("students", sid)

        assert course.students == []
