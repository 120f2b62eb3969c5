# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course API schemas."""

from typing import Annotated

from pydantic import Field

from src.models.common import (
    CamelModel,
    DocumentResponse,
    PersonSummary,
    at_least,
    not_blank,
    satisfies,
)

CourseCode = Annotated[
    str,
    not_blank("Course code is required"),
    satisfies(str.isalnum, "Course code must be alphanumeric"),
]
Title = Annotated[str, not_blank("Course title is required")]
Department = Annotated[str, not_blank("Department is required")]
Schedule = Annotated[str, not_blank("Schedule is required")]
Room = Annotated[str, not_blank("Room is required")]
Credits = Annotated[int, at_least(1, "Credits must be a positive integer")]


class CourseCreateRequest(CamelModel):
    """Request to create a course."""

    course_code: CourseCode = Field(description="Alphanumeric course code, e.g. CS101")
    title: Title = Field(description="Course title")
    department: Department = Field(description="Department; matched against instructors' course")
    schedule: Schedule = Field(description="Schedule, e.g. Mon/Wed 10:00")
    room: Room = Field(description="Room")
    credits: Credits = Field(description="Credit hours")


class CourseUpdateRequest(CamelModel):
    """Partial course update. Omitted fields are left unchanged."""

    course_code: CourseCode | None = None
    title: Title | None = None
    department: Department | None = None
    schedule: Schedule | None = None
    room: Room | None = None
    credits: Credits | None = None


class CourseResponse(DocumentResponse):
    """Course with instructors and students resolved to display fields."""

    course_code: str
    title: str
    department: str
    schedule: str
    room: str
    credits: int
    instructors: list[PersonSummary] = Field(default_factory=list)
    students: list[PersonSummary] = Field(default_factory=list)
