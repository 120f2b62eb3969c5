# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

This package contains all v1 API endpoint definitions.
Each module provides a FastAPI router for a specific domain.

Modules:
    students: Student CRUD, linked to instructors by favorite subject.
    instructors: Instructor CRUD, linked to students by course taught.
    courses: Course CRUD, linked to instructors and students by department.
    library: Book catalogue and borrow/return.
    players: Player CRUD.
    attendance: Attendance records.
"""

from fastapi import APIRouter

from src.api.v1 import attendance, courses, instructors, library, players, students

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

# Include domain routers
router.include_router(students.router, prefix="/student", tags=["Students"])
router.include_router(instructors.router, prefix="/instructor", tags=["Instructors"])
router.include_router(courses.router, prefix="/course", tags=["Courses"])
router.include_router(library.router, prefix="/library", tags=["Library"])
router.include_router(players.router, prefix="/player", tags=["Players"])
router.include_router(attendance.router, prefix="/attendance", tags=["Attendance"])

__all__ = ["router"]
