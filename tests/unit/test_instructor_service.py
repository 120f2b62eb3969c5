# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for InstructorService."""

import pytest

from src.domains.instructor.service import InstructorNotFoundError, InstructorService
from src.models.instructor import InstructorCreateRequest, InstructorUpdateRequest


@pytest.fixture
def service(store) -> InstructorService:
    return InstructorService(store)


def _create_request(**overrides) -> InstructorCreateRequest:
    values = {
        "firstName": "Emmy",
        "lastName": "Noether",
        "course": "Math",
        "gender": "Female",
        "age": 45,
        "email": "emmy@example.com",
        "qualification": "PhD",
    }
    values.update(overrides)
    return InstructorCreateRequest.model_validate(values)


class TestInstructorService:
    """Tests for instructor CRUD and linking."""

    @pytest.mark.asyncio
    async def test_create_links_students(self, service, make_student) -> None:
        math = await make_student(favorite_subject="Math")
        art = await make_student(favorite_subject="Art", email="art@example.com")

        [response] = await service.create_instructors([_create_request()])

        assert [s.id for s in response.students] == [math.id]
        assert math.instructors == [response.id]
        assert art.instructors == []

    @pytest.mark.asyncio
    async def test_update_course_relinks(self, service, make_student) -> None:
        math = await make_student(favorite_subject="Math")
        art = await make_student(favorite_subject="Art", email="art@example.com")
        [created] = await service.create_instructors([_create_request()])

        response = await service.update_instructor(
            created.id, InstructorUpdateRequest(course="Art")
        )

        assert [s.id for s in response.students] == [art.id]
        assert math.instructors == []
        assert art.instructors == [created.id]

    @pytest.mark.asyncio
    async def test_update_without_course_keeps_links(self, service, make_student) -> None:
        student = await make_student(favorite_subject="Math")
        [created] = await service.create_instructors([_create_request()])

        response = await service.update_instructor(
            created.id, InstructorUpdateRequest(qualification="Professor")
        )

        assert response.qualification == "Professor"
        assert [s.id for s in response.students] == [student.id]
        assert student.instructors == [created.id]

    @pytest.mark.asyncio
    async def test_delete_strips_references(
        self, service, store, make_student, make_course
    ) -> None:
        student = await make_student(favorite_subject="Math")
        [created] = await service.create_instructors([_create_request()])
        course = await make_course(instructors=[created.id])

        await service.delete_instructor(created.id)

        assert student.instructors == []
        assert course.instructors == []
        assert await store.instructors.find_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_get_missing(self, service, missing_id) -> None:
        with pytest.raises(InstructorNotFoundError, match="Instructor not found"):
            await service.get_instructor(missing_id)
