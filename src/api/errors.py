# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application-level exception handlers.

- Request validation failures answer 400 with the first failing field's
  message as ``{"errors": "<message>"}``.
- Persistence failures answer 500; the underlying error is logged, not
  returned.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.infrastructure.database.connection import DatabaseError

logger = logging.getLogger(__name__)


def _branch_errors(errors: list[dict[str, Any]], body: Any) -> list[dict[str, Any]]:
    """Errors of the union branch matching the shape of ``body``.

    Create routes accept ``X | list[X]``; a bad item in an array also fails
    the single-object branch, whose error would otherwise come first.
    """
    if isinstance(body, list):
        branch = [e for e in errors if any(isinstance(part, int) for part in e.get("loc", ()))]
    elif isinstance(body, dict):
        branch = [
            e
            for e in errors
            if not any(str(part).startswith("list[") for part in e.get("loc", ()))
        ]
    else:
        branch = errors
    return branch or errors


def first_error_message(errors: list[dict[str, Any]], body: Any = None) -> str:
    """Human-readable message of the first validation error.

    Validators raise ``ValueError`` with a display message, which is used
    as is. Other errors (missing field, wrong type) are prefixed with the
    field name.
    """
    if not errors:
        return "Invalid request"

    error = _branch_errors(errors, body)[0]
    ctx = error.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])

    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = loc[-1] if loc else ""
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    message = first_error_message(list(exc.errors()), exc.body)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": message},
    )


async def database_exception_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application-level exception handlers."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DatabaseError, database_exception_handler)
