# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Instructor API endpoints.

This module provides endpoints for instructor management:
- POST / - Create one or more instructors
- GET / - List instructors
- GET /{instructor_id} - Get instructor details
- PUT /{instructor_id} - Update instructor
- DELETE /{instructor_id} - Delete instructor

Creating or updating an instructor relinks it to the students whose favorite
subject is the course taught. Deleting it removes its id from students and
courses.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import get_store
from src.domains.common import InvalidIdentifierError
from src.domains.instructor.service import InstructorNotFoundError, InstructorService
from src.infrastructure.database.store import SchoolStore
from src.models.common import MessageResponse
from src.models.instructor import (
    InstructorCreateRequest,
    InstructorResponse,
    InstructorUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(store: SchoolStore) -> InstructorService:
    """Get instructor service instance."""
    return InstructorService(store)


@router.post(
    "",
    response_model=list[InstructorResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create instructors",
    description="Create a single instructor or an array of instructors.",
)
async def create_instructors(
    data: InstructorCreateRequest | list[InstructorCreateRequest] = Body(...),
    store: SchoolStore = Depends(get_store),
) -> list[InstructorResponse]:
    """Create instructors and link them to matching students."""
    requests = data if isinstance(data, list) else [data]
    logger.info("Creating %d instructor(s)", len(requests))

    return await _get_service(store).create_instructors(requests)


@router.get(
    "",
    response_model=list[InstructorResponse],
    summary="List instructors",
)
async def list_instructors(
    store: SchoolStore = Depends(get_store),
) -> list[InstructorResponse]:
    """List all instructors with students populated."""
    return await _get_service(store).list_instructors()


@router.get(
    "/{instructor_id}",
    response_model=InstructorResponse,
    summary="Get instructor",
)
async def get_instructor(
    instructor_id: str,
    store: SchoolStore = Depends(get_store),
) -> InstructorResponse:
    """Get an instructor by ID."""
    try:
        return await _get_service(store).get_instructor(instructor_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InstructorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put(
    "/{instructor_id}",
    response_model=InstructorResponse,
    summary="Update instructor",
    description="Partially update an instructor. A new course relinks students.",
)
async def update_instructor(
    instructor_id: str,
    data: InstructorUpdateRequest,
    store: SchoolStore = Depends(get_store),
) -> InstructorResponse:
    """Update an instructor."""
    try:
        return await _get_service(store).update_instructor(instructor_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InstructorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{instructor_id}",
    response_model=MessageResponse,
    summary="Delete instructor",
)
async def delete_instructor(
    instructor_id: str,
    store: SchoolStore = Depends(get_store),
) -> MessageResponse:
    """Delete an instructor and remove it from students and courses."""
    try:
        await _get_service(store).delete_instructor(instructor_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InstructorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return MessageResponse(message="Instructor deleted successfully")
