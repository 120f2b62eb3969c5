# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for request schema validation messages."""

import pytest
from pydantic import ValidationError

from src.models.attendance import AttendanceCreateRequest
from src.models.book import BookCreateRequest
from src.models.course import CourseCreateRequest
from src.models.player import PlayerCreateRequest
from src.models.student import StudentCreateRequest, StudentResponse
from src.utils.datetime import utc_now


def _message(exc: ValidationError) -> str:
    return str(exc.errors()[0]["ctx"]["error"])


STUDENT = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "gender": "Female",
    "age": 17,
    "favoriteSubject": "Math",
    "grade": "12",
    "email": "ada@example.com",
}

BOOK = {
    "bookTitle": "Dune",
    "author": "Frank Herbert",
    "publisher": "Chilton",
    "publicationYear": 1965,
    "shelveLocation": "F3",
    "genre": "Science Fiction",
    "copiesAvailable": 2,
}


class TestStudentSchema:
    """Tests for student request validation."""

    def test_accepts_camel_case_payload(self) -> None:
        request = StudentCreateRequest.model_validate(STUDENT)

        assert request.favorite_subject == "Math"

    def test_blank_first_name(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest.model_validate({**STUDENT, "firstName": "  "})

        assert _message(exc_info.value) == "First name is required"

    def test_non_positive_age(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest.model_validate({**STUDENT, "age": 0})

        assert _message(exc_info.value) == "Age must be a positive integer"

    def test_invalid_email(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest.model_validate({**STUDENT, "email": "not-an-email"})

        assert _message(exc_info.value) == "Email is invalid"

    def test_response_serializes_camel_case(self) -> None:
        response = StudentResponse(
            id="s1",
            created_at=utc_now(),
            first_name="Ada",
            last_name="Lovelace",
            gender="Female",
            age=17,
            favorite_subject="Math",
            grade="12",
            email="ada@example.com",
        )

        data = response.model_dump(by_alias=True)

        assert data["favoriteSubject"] == "Math"
        assert data["instructors"] == []
        assert "createdAt" in data


class TestOtherSchemas:
    """Tests for course, book, player and attendance validation."""

    def test_course_code_must_be_alphanumeric(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CourseCreateRequest.model_validate(
                {
                    "courseCode": "CS-101",
                    "title": "Intro",
                    "department": "CS",
                    "schedule": "Mon",
                    "room": "1",
                    "credits": 3,
                }
            )

        assert _message(exc_info.value) == "Course code must be alphanumeric"

    def test_publication_year_in_future(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            BookCreateRequest.model_validate({**BOOK, "publicationYear": utc_now().year + 1})

        assert _message(exc_info.value) == "Publication year must be a valid year"

    def test_copies_must_be_positive(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            BookCreateRequest.model_validate({**BOOK, "copiesAvailable": 0})

        assert _message(exc_info.value) == "Copies available must be a positive integer"

    def test_negative_goals(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PlayerCreateRequest.model_validate(
                {
                    "firstName": "Marta",
                    "lastName": "Vieira",
                    "countryName": "Brazil",
                    "gender": "Female",
                    "age": 38,
                    "position": "Forward",
                    "goals": -1,
                }
            )

        assert _message(exc_info.value) == "Goals must not be a negative integer"

    def test_attendance_status(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AttendanceCreateRequest.model_validate(
                {"studentId": "s", "courseId": "c", "status": "Sick"}
            )

        assert "not a supported status" in _message(exc_info.value)
