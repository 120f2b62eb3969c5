# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Instructor API schemas."""

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
CourseName = Annotated[str, not_blank("Course is required")]
Gender = Annotated[str, not_blank("Gender is required")]
Age = Annotated[int, at_least(1, "Age must be a positive integer")]
Email = Annotated[str, email_address()]
Qualification = Annotated[str, not_blank("Qualification is required")]


class InstructorCreateRequest(CamelModel):
    """Request to create an instructor."""

    first_name: FirstName = Field(description="First name")
    last_name: LastName = Field(description="Last name")
    course: CourseName = Field(description="Subject taught; matched against students and courses")
    gender: Gender = Field(description="Gender")
    age: Age = Field(description="Age in years")
    email: Email = Field(description="Email address")
    qualification: Qualification = Field(description="Highest qualification")


class InstructorUpdateRequest(CamelModel):
    """Partial instructor update. Omitted fields are left unchanged."""

    first_name: FirstName | None = None
    last_name: LastName | None = None
    course: CourseName | None = None
    gender: Gender | None = None
    age: Age | None = None
    email: Email | None = None
    qualification: Qualification | None = None


class InstructorResponse(DocumentResponse):
    """Instructor with its students resolved to display fields."""

    first_name: str
    last_name: str
    course: str
    gender: str
    age: int
    email: str
    qualification: str
    students: list[PersonSummary] = Field(default_factory=list)
    courses: list[str] = Field(default_factory=list, description="Matched course IDs")
