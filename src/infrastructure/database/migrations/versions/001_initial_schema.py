# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Initial school records schema.

Creates the six collections: students, instructors, courses, books,
players and attendance. Reference lists and embedded borrow records are
JSON arrays.

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-01-06
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _document_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create all collections."""

    op.create_table(
        "students",
        *_document_columns(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("gender", sa.String(30), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("favorite_subject", sa.String(100), nullable=False),
        sa.Column("grade", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("instructors", sa.JSON, nullable=False),
        sa.Column("courses", sa.JSON, nullable=False),
    )
    op.create_index("ix_students_favorite_subject", "students", ["favorite_subject"])

    op.create_table(
        "instructors",
        *_document_columns(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("course", sa.String(100), nullable=False),
        sa.Column("gender", sa.String(30), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("qualification", sa.String(100), nullable=False),
        sa.Column("students", sa.JSON, nullable=False),
        sa.Column("courses", sa.JSON, nullable=False),
    )
    op.create_index("ix_instructors_course", "instructors", ["course"])

    op.create_table(
        "courses",
        *_document_columns(),
        sa.Column("course_code", sa.String(30), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("department", sa.String(100), nullable=False),
        sa.Column("schedule", sa.String(100), nullable=False),
        sa.Column("room", sa.String(50), nullable=False),
        sa.Column("credits", sa.Integer, nullable=False),
        sa.Column("instructors", sa.JSON, nullable=False),
        sa.Column("students", sa.JSON, nullable=False),
    )
    op.create_index("ix_courses_department", "courses", ["department"])

    op.create_table(
        "books",
        *_document_columns(),
        sa.Column("book_title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(200), nullable=False),
        sa.Column("publisher", sa.String(200), nullable=False),
        sa.Column("publication_year", sa.Integer, nullable=False),
        sa.Column("shelve_location", sa.String(50), nullable=False),
        sa.Column("genre", sa.String(100), nullable=False),
        sa.Column("copies_available", sa.Integer, nullable=False),
        sa.Column("borrowed_by", sa.JSON, nullable=False),
        sa.CheckConstraint("copies_available >= 0", name="ck_books_copies_available"),
    )

    op.create_table(
        "players",
        *_document_columns(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("country_name", sa.String(100), nullable=False),
        sa.Column("gender", sa.String(30), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("position", sa.String(50), nullable=False),
        sa.Column("goals", sa.Integer, nullable=False),
    )

    op.create_table(
        "attendance",
        *_document_columns(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("student_id", sa.Uuid(as_uuid=False), nullable=False),
        sa.Column("course_id", sa.Uuid(as_uuid=False), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        # 'Present', 'Absent', 'Late'
        sa.Column("notes", sa.Text, nullable=True),
    )
    op.create_index("ix_attendance_student_id", "attendance", ["student_id"])
    op.create_index("ix_attendance_course_id", "attendance", ["course_id"])


def downgrade() -> None:
    """Drop all collections."""
    op.drop_table("attendance")
    op.drop_table("players")
    op.drop_table("books")
    op.drop_table("courses")
    op.drop_table("instructors")
    op.drop_table("students")
