# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course API endpoints.

This module provides endpoints for course management:
- POST / - Create one or more courses
- GET / - List courses
- GET /{course_id} - Get course details
- PUT /{course_id} - Update course
- DELETE /{course_id} - Delete course

A course's instructors and students are recomputed from its department on
every create and update.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import get_store
from src.domains.common import InvalidIdentifierError
from src.domains.course.service import CourseNotFoundError, CourseService
from src.infrastructure.database.store import SchoolStore
from src.models.common import MessageResponse
from src.models.course import CourseCreateRequest, CourseResponse, CourseUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(store: SchoolStore) -> CourseService:
    """Get course service instance."""
    return CourseService(store)


@router.post(
    "",
    response_model=list[CourseResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create courses",
    description="Create a single course or an array of courses.",
)
async def create_courses(
    data: CourseCreateRequest | list[CourseCreateRequest] = Body(...),
    store: SchoolStore = Depends(get_store),
) -> list[CourseResponse]:
    """Create courses and link them by department."""
    requests = data if isinstance(data, list) else [data]
    logger.info("Creating %d course(s)", len(requests))

    return await _get_service(store).create_courses(requests)


@router.get("", response_model=list[CourseResponse], summary="List courses")
async def list_courses(
    store: SchoolStore = Depends(get_store),
) -> list[CourseResponse]:
    return await _get_service(store).list_courses()


@router.get("/{course_id}", response_model=CourseResponse, summary="Get course")
async def get_course(
    course_id: str,
    store: SchoolStore = Depends(get_store),
) -> CourseResponse:
    try:
        return await _get_service(store).get_course(course_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Update course",
    description="Partially update a course. A new department relinks instructors and students.",
)
async def update_course(
    course_id: str,
    data: CourseUpdateRequest,
    store: SchoolStore = Depends(get_store),
) -> CourseResponse:
    try:
        return await _get_service(store).update_course(course_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{course_id}", response_model=MessageResponse, summary="Delete course")
async def delete_course(
    course_id: str,
    store: SchoolStore = Depends(get_store),
) -> MessageResponse:
    """Delete a course and remove it from instructors and students."""
    try:
        await _get_service(store).delete_course(course_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CourseNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return MessageResponse(message="Course deleted successfully")
