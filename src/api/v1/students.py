# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API endpoints.

This module provides endpoints for student management:
- POST / - Create one or more students
- GET / - List students
- GET /{student_id} - Get student details
- PUT /{student_id} - Update student
- DELETE /{student_id} - Delete student

Creating or updating a student relinks it to the instructors teaching its
favorite subject. Deleting it removes its id from instructors and courses.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import get_store
from src.domains.common import InvalidIdentifierError
from src.domains.student.service import StudentNotFoundError, StudentService
from src.infrastructure.database.store import SchoolStore
from src.models.common import MessageResponse
from src.models.student import (
    StudentCreateRequest,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(store: SchoolStore) -> StudentService:
    """Get student service instance."""
    return StudentService(store)


@router.post(
    "",
    response_model=list[StudentResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create students",
    description="Create a single student or an array of students.",
)
async def create_students(
    data: StudentCreateRequest | list[StudentCreateRequest] = Body(...),
    store: SchoolStore = Depends(get_store),
) -> list[StudentResponse]:
    """Create students and link them to matching instructors."""
    requests = data if isinstance(data, list) else [data]
    logger.info("Creating %d student(s)", len(requests))

    return await _get_service(store).create_students(requests)


@router.get(
    "",
    response_model=list[StudentResponse],
    summary="List students",
)
async def list_students(
    store: SchoolStore = Depends(get_store),
) -> list[StudentResponse]:
    """List all students with instructors populated."""
    return await _get_service(store).list_students()


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get student",
)
async def get_student(
    student_id: str,
    store: SchoolStore = Depends(get_store),
) -> StudentResponse:
    """Get a student by ID."""
    try:
        return await _get_service(store).get_student(student_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Update student",
    description="Partially update a student. A new favorite subject relinks instructors.",
)
async def update_student(
    student_id: str,
    data: StudentUpdateRequest,
    store: SchoolStore = Depends(get_store),
) -> StudentResponse:
    """Update a student."""
    try:
        return await _get_service(store).update_student(student_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{student_id}",
    response_model=MessageResponse,
    summary="Delete student",
)
async def delete_student(
    student_id: str,
    store: SchoolStore = Depends(get_store),
) -> MessageResponse:
    """Delete a student and remove it from instructors and courses."""
    try:
        await _get_service(store).delete_student(student_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return MessageResponse(message="Student deleted successfully")
