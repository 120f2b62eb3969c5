# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Relationship domain package.

This package keeps the many-to-many reference lists between students,
instructors and courses consistent with their match fields:
- Link declarations (which fields match, which lists are written)
- Pure link planning
- The synchronizer applying plans through the document store
"""

from src.domains.relationships.links import (
    COURSE_INSTRUCTORS,
    COURSE_STUDENTS,
    INSTRUCTOR_STUDENTS,
    LINKS,
    STUDENT_INSTRUCTORS,
    Link,
    referencing_fields,
)
from src.domains.relationships.planner import LinkPlan, plan_link
from src.domains.relationships.synchronizer import RelationshipSynchronizer

__all__ = [
    "Link",
    "LINKS",
    "STUDENT_INSTRUCTORS",
    "INSTRUCTOR_STUDENTS",
    "COURSE_INSTRUCTORS",
    "COURSE_STUDENTS",
    "referencing_fields",
    "LinkPlan",
    "plan_link",
    "RelationshipSynchronizer",
]
