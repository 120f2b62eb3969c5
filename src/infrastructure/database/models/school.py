# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""School collections: students, instructors, courses, players, attendance.

Reference lists are JSON arrays of document ids. They are owned by the
relationship synchronizer and the cascade deleter; request payloads never
write them directly.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database.models.base import Base, DocumentMixin, TimestampMixin
from src.utils.datetime import utc_now


class Student(DocumentMixin, Base):
    """Student document.

    ``instructors`` holds the instructors teaching ``favorite_subject``;
    ``courses`` holds the courses whose department matches it.
    """

    __tablename__ = "students"
    __reference_lists__ = ("instructors", "courses")

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    gender: Mapped[str] = mapped_column(String(30), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    favorite_subject: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    grade: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    instructors: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    courses: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)


class Instructor(DocumentMixin, Base):
    """Instructor document.

    ``course`` is the subject taught and the match key against both
    ``Student.favorite_subject`` and ``Course.department``.
    """

    __tablename__ = "instructors"
    __reference_lists__ = ("students", "courses")

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    course: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(30), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    qualification: Mapped[str] = mapped_column(String(100), nullable=False)
    students: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    courses: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)


class Course(DocumentMixin, Base):
    """Course document keyed to instructors and students by ``department``."""

    __tablename__ = "courses"
    __reference_lists__ = ("instructors", "students")

    course_code: Mapped[str] = mapped_column(String(30), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    schedule: Mapped[str] = mapped_column(String(100), nullable=False)
    room: Mapped[str] = mapped_column(String(50), nullable=False)
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
    instructors: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    students: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)


class Player(DocumentMixin, Base):
    """Player document. Independent of every other collection."""

    __tablename__ = "players"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    country_name: Mapped[str] = mapped_column(String(100), nullable=False)
    gender: Mapped[str] = mapped_column(String(30), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[str] = mapped_column(String(50), nullable=False)
    goals: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class Attendance(DocumentMixin, TimestampMixin, Base):
    """Attendance record of one student in one course on one date."""

    __tablename__ = "attendance"

    student_id: Mapped[str] = mapped_column(Uuid(as_uuid=False), nullable=False, index=True)
    course_id: Mapped[str] = mapped_column(Uuid(as_uuid=False), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    # 'Present', 'Absent', 'Late'
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
