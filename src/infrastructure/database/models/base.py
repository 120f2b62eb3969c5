# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Declarative base and shared column mixins.

Every collection is stored as a table whose rows behave like documents:
scalar fields map to plain columns and reference lists (ids of documents in
another collection) map to JSON array columns listed in
``__reference_lists__``.
"""

from datetime import datetime
from typing import ClassVar
from uuid import uuid4

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.utils.datetime import utc_now


def new_id() -> str:
    """Generate a new document identifier."""
    return str(uuid4())


class Base(DeclarativeBase):
    """Declarative base for all school records models."""

    __reference_lists__: ClassVar[tuple[str, ...]] = ()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={getattr(self, 'id', None)}>"


class DocumentMixin:
    """Identifier and creation timestamp shared by every collection."""

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=new_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )


class TimestampMixin:
    """Update timestamp for collections that track modifications."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
