# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API schemas."""

from typing import Annotated

from pydantic import Field

from src.models.common import (
    CamelModel,
    DocumentResponse,
    PersonSummary,
    at_least,
    email_address,
    not_blank,
)

FirstName = Annotated[str, not_blank("First name is required")]
LastName = Annotated[str, not_blank("Last name is required")]
Gender = Annotated[str, not_blank("Gender is required")]
Age = Annotated[int, at_least(1, "Age must be a positive integer")]
FavoriteSubject = Annotated[str, not_blank("Favorite subject is required")]
Grade = Annotated[str, not_blank("Grade is required")]
Email = Annotated[str, email_address()]


class StudentCreateRequest(CamelModel):
    """Request to create a student.

    The ``instructors`` list is never accepted from clients; it is
    computed from ``favoriteSubject``.
    """

    first_name: FirstName = Field(description="First name")
    last_name: LastName = Field(description="Last name")
    gender: Gender = Field(description="Gender")
    age: Age = Field(description="Age in years")
    favorite_subject: FavoriteSubject = Field(
        description="Subject matched against instructors' course",
    )
    grade: Grade = Field(description="Grade")
    email: Email = Field(description="Email address")


class StudentUpdateRequest(CamelModel):
    """Partial student update. Omitted fields are left unchanged."""

    first_name: FirstName | None = None
    last_name: LastName | None = None
    gender: Gender | None = None
    age: Age | None = None
    favorite_subject: FavoriteSubject | None = None
    grade: Grade | None = None
    email: Email | None = None


class StudentResponse(DocumentResponse):
    """Student with its instructors resolved to display fields."""

    first_name: str
    last_name: str
    gender: str
    age: int
    favorite_subject: str
    grade: str
    email: str
    instructors: list[PersonSummary] = Field(default_factory=list)
    courses: list[str] = Field(default_factory=list, description="Matched course IDs")
