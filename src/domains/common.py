# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions and helpers shared by the entity services."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any
from uuid import UUID

from src.models.common import PersonSummary


class EntityServiceError(Exception):
    """Base exception for entity service errors."""

    pass


class EntityNotFoundError(EntityServiceError):
    """Raised when a well-formed identifier matches no document."""

    pass


class InvalidIdentifierError(EntityServiceError):
    """Raised when an identifier is not a valid document ID."""

    pass


def parse_id(value: str, label: str) -> str:
    """Normalize a document identifier.

    Args:
        value: Raw identifier from the request.
        label: Entity name used in the error message, e.g. "student".

    Returns:
        Canonical lowercase UUID string.

    Raises:
        InvalidIdentifierError: If ``value`` is not a UUID.
    """
    try:
        return str(UUID(str(value)))
    except ValueError as e:
        raise InvalidIdentifierError(f"Invalid {label} ID") from e


def present_changes(
    changes: Mapping[str, Any],
    nullable: Iterable[str] = (),
) -> dict[str, Any]:
    """Drop explicit nulls from a partial update.

    Fields listed in ``nullable`` keep an explicit null, which clears them.
    """
    keep = set(nullable)
    return {
        field: value
        for field, value in changes.items()
        if value is not None or field in keep
    }


def to_person_summaries(people: Sequence[Any]) -> list[PersonSummary]:
    """Convert student or instructor documents to display summaries."""
    return [
        PersonSummary(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            email=person.email,
        )
        for person in people
    ]
