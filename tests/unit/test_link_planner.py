# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for link declarations and link planning."""

from src.domains.relationships.links import (
    COURSE_INSTRUCTORS,
    COURSE_STUDENTS,
    INSTRUCTOR_STUDENTS,
    STUDENT_INSTRUCTORS,
    referencing_fields,
)
from src.domains.relationships.planner import LinkPlan, plan_link


class TestPlanLink:
    """Tests for plan_link."""

    def test_new_owner_references_every_match(self) -> None:
        """A new owner's list is exactly the matches, each gaining the owner."""
        plan = plan_link(["i1", "i2"])

        assert plan == LinkPlan(references=["i1", "i2"], pull_from=[], add_to=["i1", "i2"])

    def test_no_matches_yields_empty_plan(self) -> None:
        plan = plan_link([])

        assert plan.references == []
        assert plan.pull_from == []
        assert plan.add_to == []

    def test_every_holder_is_pulled(self) -> None:
        """Holders are pulled whether or not they still match."""
        plan = plan_link(["i2", "i3"], holder_ids=["i1", "i2"])

        assert plan.pull_from == ["i1", "i2"]
        assert plan.add_to == ["i2", "i3"]
        assert plan.references == ["i2", "i3"]

    def test_duplicates_are_collapsed_in_order(self) -> None:
        plan = plan_link(["i2", "i1", "i2"], holder_ids=["i1", "i1"])

        assert plan.references == ["i2", "i1"]
        assert plan.pull_from == ["i1"]

    def test_accepts_generators(self) -> None:
        plan = plan_link((i for i in ["a", "b"]), holder_ids=iter(["c"]))

        assert plan.references == ["a", "b"]
        assert plan.pull_from == ["c"]


class TestLinks:
    """Tests for link declarations."""

    def test_instructor_students_mirrors_student_instructors(self) -> None:
        assert INSTRUCTOR_STUDENTS.owner == STUDENT_INSTRUCTORS.counterpart
        assert INSTRUCTOR_STUDENTS.owner_match == "course"
        assert INSTRUCTOR_STUDENTS.owner_refs == "students"
        assert INSTRUCTOR_STUDENTS.counterpart == "students"
        assert INSTRUCTOR_STUDENTS.counterpart_match == "favorite_subject"
        assert INSTRUCTOR_STUDENTS.counterpart_refs == "instructors"

    def test_course_links_match_on_department(self) -> None:
        assert COURSE_INSTRUCTORS.owner_match == "department"
        assert COURSE_INSTRUCTORS.counterpart_match == "course"
        assert COURSE_STUDENTS.owner_match == "department"
        assert COURSE_STUDENTS.counterpart_match == "favorite_subject"

    def test_referencing_fields_for_students(self) -> None:
        assert referencing_fields("students") == [
            ("instructors", "students"),
            ("courses", "students"),
        ]

    def test_referencing_fields_for_instructors(self) -> None:
        assert referencing_fields("instructors") == [
            ("students", "instructors"),
            ("courses", "instructors"),
        ]

    def test_referencing_fields_for_courses(self) -> None:
        assert referencing_fields("courses") == [
            ("instructors", "courses"),
            ("students", "courses"),
        ]

    def test_unlinked_collection_has_no_referencing_fields(self) -> None:
        assert referencing_fields("players") == []
        assert referencing_fields("books") == []
