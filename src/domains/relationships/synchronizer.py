# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Relationship synchronizer.

Keeps the reference lists of a link consistent with its match predicate
(equality of the two match fields) whenever the owner side is written:

- on create: the owner's list becomes exactly the current matching set and
  every match gains the owner's id. Stale counterpart entries are left as
  they are.
- on update: the owner's id is pulled from every counterpart holding it,
  the matching set is recomputed from the post-update key, the owner's
  list is replaced (possibly with an empty list) and every match gains the
  owner's id.

Writes are sequential and each commits on its own. If a counterpart patch
fails after the owner was saved, the error propagates and the earlier
writes stay applied.
"""

import logging
from collections.abc import Iterable
from typing import Any

from src.domains.relationships.links import Link
from src.domains.relationships.planner import LinkPlan, plan_link
from src.infrastructure.database.store import SchoolStore

logger = logging.getLogger(__name__)


class RelationshipSynchronizer:
    """Applies link plans through the document store.

    Attributes:
        store: Document store holding both sides of every link.
    """

    def __init__(self, store: SchoolStore) -> None:
        self.store = store

    async def on_created(self, entity: Any, link: Link) -> LinkPlan:
        """Link a newly created owner to its current matches.

        Args:
            entity: Persisted owner document.
            link: Link driven by the owner's collection.

        Returns:
            The applied plan.
        """
        matched = await self._find_matches(entity, link)
        plan = plan_link(matched)
        await self._apply(entity, link, plan)
        return plan

    async def on_created_many(self, entities: Iterable[Any], link: Link) -> None:
        """Link a batch of new owners one after another."""
        for entity in entities:
            await self.on_created(entity, link)

    async def on_updated(self, entity: Any, link: Link) -> LinkPlan:
        """Relink an owner after its fields were updated and saved.

        Args:
            entity: Persisted owner document carrying its new match key.
            link: Link driven by the owner's collection.

        Returns:
            The applied plan.
        """
        counterparts = self.store.collection(link.counterpart)
        holders = await counterparts.find_all(**{link.counterpart_refs: entity.id})
        matched = await self._find_matches(entity, link)
        plan = plan_link(matched, [holder.id for holder in holders])
        await self._apply(entity, link, plan)
        return plan

    async def _find_matches(self, entity: Any, link: Link) -> list[str]:
        counterparts = self.store.collection(link.counterpart)
        key = getattr(entity, link.owner_match)
        matches = await counterparts.find_all(**{link.counterpart_match: key})
        return [match.id for match in matches]

    async def _apply(self, entity: Any, link: Link, plan: LinkPlan) -> None:
        owner = self.store.collection(link.owner)
        counterparts = self.store.collection(link.counterpart)

        if plan.pull_from:
            await counterparts.update_many(
                {"id": plan.pull_from},
                pull={link.counterpart_refs: entity.id},
            )

        setattr(entity, link.owner_refs, list(plan.references))
        await owner.save(entity)

        if plan.add_to:
            await counterparts.update_many(
                {"id": plan.add_to},
                add_to_set={link.counterpart_refs: entity.id},
            )

        logger.info(
            "Synchronized %s: owner=%s, matched=%d, pulled=%d",
            link.name,
            entity.id,
            len(plan.references),
            len(plan.pull_from),
        )
