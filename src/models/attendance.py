# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Attendance API schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, Field

from src.models.common import CamelModel, DocumentResponse

ATTENDANCE_STATUSES = ("Present", "Absent", "Late")


def _status(value: str) -> str:
    if value not in ATTENDANCE_STATUSES:
        raise ValueError(f"{value} is not a supported status (Present, Absent, Late)")
    return value


Status = Annotated[str, AfterValidator(_status)]


class AttendanceCreateRequest(CamelModel):
    """Request to record attendance. ``date`` defaults to now."""

    student_id: str = Field(description="Student ID")
    course_id: str = Field(description="Course ID")
    date: datetime | None = Field(default=None, description="When attendance was taken")
    status: Status = Field(description="Present, Absent or Late")
    notes: str | None = Field(default=None, description="Optional remarks")


class AttendanceUpdateRequest(CamelModel):
    """Partial attendance update. Student and course are fixed."""

    date: datetime | None = None
    status: Status | None = None
    notes: str | None = None


class AttendanceStudent(CamelModel):
    """Display fields of the attending student."""

    id: str
    first_name: str
    last_name: str


class AttendanceCourse(CamelModel):
    """Display fields of the course."""

    id: str
    title: str


class AttendanceResponse(DocumentResponse):
    """Attendance record with student and course resolved."""

    student_id: str
    course_id: str
    student: AttendanceStudent | None = None
    course: AttendanceCourse | None = None
    date: datetime
    status: str
    notes: str | None = None
    updated_at: datetime
