# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure for the school records store.

This package provides:
- connection: SQLAlchemy async engine and session lifecycle
- models: Declarative models for every collection
- store: Document-collection operations used by the domain services

Example:
    from src.infrastructure.database import get_session, SchoolStore

    async with get_session() as session:
        store = SchoolStore(session)
        students = await store.students.find_all(favorite_subject="Math")
"""

from src.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)
from src.infrastructure.database.store import (
    DocumentCollection,
    SchoolStore,
    set_add,
    set_pull,
)

__all__ = [
    # Connection
    "DatabaseError",
    "check_database_connection",
    "close_database",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
    # Store
    "DocumentCollection",
    "SchoolStore",
    "set_add",
    "set_pull",
]
