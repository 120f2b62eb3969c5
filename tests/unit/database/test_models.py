# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for database models.

Tests table definitions, reference-list declarations and the migration
that creates them.
"""

import importlib

from sqlalchemy import JSON

from src.infrastructure.database.models import (
    Attendance,
    Base,
    Book,
    Course,
    Instructor,
    Player,
    Student,
)
from src.infrastructure.database.models.base import new_id


class TestBase:
    """Test base model functionality."""

    def test_base_inherits_declarative_base(self):
        """Verify Base is a declarative base."""
        assert hasattr(Base, "metadata")
        assert hasattr(Base, "registry")

    def test_all_collections_registered(self):
        assert set(Base.metadata.tables) == {
            "students",
            "instructors",
            "courses",
            "books",
            "players",
            "attendance",
        }

    def test_new_id_is_uuid_string(self):
        value = new_id()

        assert isinstance(value, str)
        assert len(value) == 36
        assert new_id() != value


class TestReferenceLists:
    """Reference lists are JSON columns declared on the model."""

    def test_declared_reference_lists(self):
        assert Student.__reference_lists__ == ("instructors", "courses")
        assert Instructor.__reference_lists__ == ("students", "courses")
        assert Course.__reference_lists__ == ("instructors", "students")
        assert Player.__reference_lists__ == ()
        assert Book.__reference_lists__ == ()

    def test_reference_lists_are_json_columns(self):
        for model in (Student, Instructor, Course):
            for field in model.__reference_lists__:
                assert isinstance(model.__table__.columns[field].type, JSON)

    def test_book_copies_constraint(self):
        names = {constraint.name for constraint in Book.__table__.constraints}

        assert "ck_books_copies_available" in names

    def test_attendance_tracks_updates(self):
        assert "updated_at" in Attendance.__table__.columns
        assert "updated_at" not in Student.__table__.columns


class TestInitialMigration:
    """Tests for the initial schema migration module."""

    def test_revision_identifiers(self):
        migration = importlib.import_module(
            "src.infrastructure.database.migrations.versions.001_initial_schema"
        )

        assert migration.revision == "001_initial_schema"
        assert migration.down_revision is None
        assert callable(migration.upgrade)
        assert callable(migration.downgrade)
