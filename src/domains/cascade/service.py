# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cascade deleter.

After a student, instructor or course is deleted, its id is pulled from
every reference list that can hold it. Which lists those are follows from
the link declarations. Every removal is attempted even if an earlier
one fails; the first failure is re-raised once all have been tried.
"""

import logging

from src.domains.relationships.links import referencing_fields
from src.infrastructure.database.connection import DatabaseError
from src.infrastructure.database.store import SchoolStore

logger = logging.getLogger(__name__)


class CascadeDeleter:
    """Strips dangling references left by a delete.

    Attributes:
        store: Document store holding the referencing collections.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store

    async def strip_references(self, collection: str, entity_id: str) -> int:
        """Remove ``entity_id`` from every list referencing ``collection``.

        Args:
            collection: Collection the deleted document belonged to.
            entity_id: ID of the deleted document.

        Returns:
            Number of documents modified.

        Raises:
            DatabaseError: The first removal failure, after all removals
                were attempted.
        """
        modified = 0
        failures: list[DatabaseError] = []

        for target, field in referencing_fields(collection):
            try:
                modified += await self.store.collection(target).update_many(
                    {field: entity_id},
                    pull={field: entity_id},
                )
            except DatabaseError as e:
                logger.warning(
                    "Failed to strip %s from %s.%s: %s",
                    entity_id,
                    target,
                    field,
                    e,
                )
                failures.append(e)

        logger.info(
            "Stripped references: collection=%s, id=%s, modified=%d, failed=%d",
            collection,
            entity_id,
            modified,
            len(failures),
        )

        if failures:
            raise failures[0]
        return modified
