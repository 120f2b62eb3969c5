# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Attendance API endpoints.

This module provides endpoints for attendance records:
- POST / - Record attendance
- GET / - List records, filterable by studentId and courseId
- GET /{attendance_id} - Get record details
- PUT /{attendance_id} - Update record
- DELETE /{attendance_id} - Delete record
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.api.dependencies import get_store
from src.domains.attendance.service import (
    AttendanceNotFoundError,
    AttendanceReferenceError,
    AttendanceService,
)
from src.domains.common import InvalidIdentifierError
from src.infrastructure.database.store import SchoolStore
from src.models.attendance import (
    AttendanceCreateRequest,
    AttendanceResponse,
    AttendanceUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(store: SchoolStore) -> AttendanceService:
    """Get attendance service instance."""
    return AttendanceService(store)


@router.post(
    "",
    response_model=AttendanceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record attendance",
    description="Record attendance of an existing student in an existing course.",
)
async def record_attendance(
    data: AttendanceCreateRequest,
    store: SchoolStore = Depends(get_store),
) -> AttendanceResponse:
    try:
        return await _get_service(store).record_attendance(data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AttendanceReferenceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "",
    response_model=list[AttendanceResponse],
    summary="List attendance",
)
async def list_attendance(
    student_id: Annotated[str | None, Query(alias="studentId", description="Filter by student")] = None,
    course_id: Annotated[str | None, Query(alias="courseId", description="Filter by course")] = None,
    store: SchoolStore = Depends(get_store),
) -> list[AttendanceResponse]:
    """List attendance records with optional student and course filters."""
    try:
        return await _get_service(store).list_attendance(
            student_id=student_id,
            course_id=course_id,
        )
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/{attendance_id}",
    response_model=AttendanceResponse,
    summary="Get attendance record",
)
async def get_attendance(
    attendance_id: str,
    store: SchoolStore = Depends(get_store),
) -> AttendanceResponse:
    try:
        return await _get_service(store).get_attendance(attendance_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AttendanceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put(
    "/{attendance_id}",
    response_model=AttendanceResponse,
    summary="Update attendance record",
)
async def update_attendance(
    attendance_id: str,
    data: AttendanceUpdateRequest,
    store: SchoolStore = Depends(get_store),
) -> AttendanceResponse:
    try:
        return await _get_service(store).update_attendance(attendance_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AttendanceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{attendance_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete attendance record",
)
async def delete_attendance(
    attendance_id: str,
    store: SchoolStore = Depends(get_store),
) -> Response:
    try:
        await _get_service(store).delete_attendance(attendance_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AttendanceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
