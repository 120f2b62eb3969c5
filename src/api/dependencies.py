# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

This module provides dependency functions for FastAPI endpoints:
- Database session per request
- Document store bound to that session

Example:
    @router.get("")
    async def list_students(
        store: SchoolStore = Depends(get_store),
    ):
        ...
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.infrastructure.database.connection import (
    close_database,
    get_session,
    init_database,
)
from src.infrastructure.database.store import SchoolStore

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Initialize the database connection pool."""
    await init_database(get_settings())


async def close_db() -> None:
    """Close the database connection pool."""
    await close_database()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the current request.

    Yields:
        AsyncSession for the school records database.
    """
    async with get_session() as session:
        yield session


def get_store(db: AsyncSession = Depends(get_db)) -> SchoolStore:
    """Get the document store bound to the request's session."""
    return SchoolStore(db)
