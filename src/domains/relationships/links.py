# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Declarations of the match-driven many-to-many links.

A link ties an *owner* collection to a *counterpart* collection through a
match field on each side. Writing an owner recomputes the owner's
reference list and patches the counterparts; the counterpart side never
triggers a recompute of this link.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """One direction of a match-driven relationship.

    Attributes:
        name: Identifier used in logs.
        owner: Collection whose writes drive the link.
        owner_match: Owner field holding the match key.
        owner_refs: Owner reference list that is fully recomputed.
        counterpart: Collection searched for matches.
        counterpart_match: Counterpart field compared to the owner's key.
        counterpart_refs: Counterpart reference list that receives the owner id.
    """

    name: str
    owner: str
    owner_match: str
    owner_refs: str
    counterpart: str
    counterpart_match: str
    counterpart_refs: str

    def reversed(self, name: str) -> "Link":
        """The same relationship driven from the counterpart side."""
        return Link(
            name=name,
            owner=self.counterpart,
            owner_match=self.counterpart_match,
            owner_refs=self.counterpart_refs,
            counterpart=self.owner,
            counterpart_match=self.owner_match,
            counterpart_refs=self.owner_refs,
        )


STUDENT_INSTRUCTORS = Link(
    name="student-instructors",
    owner="students",
    owner_match="favorite_subject",
    owner_refs="instructors",
    counterpart="instructors",
    counterpart_match="course",
    counterpart_refs="students",
)

INSTRUCTOR_STUDENTS = STUDENT_INSTRUCTORS.reversed("instructor-students")

COURSE_INSTRUCTORS = Link(
    name="course-instructors",
    owner="courses",
    owner_match="department",
    owner_refs="instructors",
    counterpart="instructors",
    counterpart_match="course",
    counterpart_refs="courses",
)

COURSE_STUDENTS = Link(
    name="course-students",
    owner="courses",
    owner_match="department",
    owner_refs="students",
    counterpart="students",
    counterpart_match="favorite_subject",
    counterpart_refs="courses",
)

LINKS: tuple[Link, ...] = (
    STUDENT_INSTRUCTORS,
    INSTRUCTOR_STUDENTS,
    COURSE_INSTRUCTORS,
    COURSE_STUDENTS,
)


def referencing_fields(collection: str) -> list[tuple[str, str]]:
    """Every (collection, reference list) that can hold ids of ``collection``.

    Args:
        collection: Name of the referenced collection, e.g. "students".

    Returns:
        Unique (collection, field) pairs in declaration order.
    """
    fields: list[tuple[str, str]] = []
    for link in LINKS:
        if link.owner == collection:
            pair = (link.counterpart, link.counterpart_refs)
        elif link.counterpart == collection:
            pair = (link.owner, link.owner_refs)
        else:
            continue
        if pair not in fields:
            fields.append(pair)
    return fields
