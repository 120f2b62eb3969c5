# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pure planning of reference-list updates.

Planning is independent of persistence: given the counterparts that
currently match the owner and the counterparts that currently hold the
owner's id, it returns the owner's new list and the counterpart patches.
"""

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class LinkPlan:
    """Writes needed to bring one owner's link up to date.

    Attributes:
        references: Owner's new reference list (full replacement).
        pull_from: Counterparts that must drop the owner's id.
        add_to: Counterparts that must gain the owner's id (set-add).
    """

    references: list[str] = field(default_factory=list)
    pull_from: list[str] = field(default_factory=list)
    add_to: list[str] = field(default_factory=list)


def _unique(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def plan_link(matched_ids: Iterable[str], holder_ids: Iterable[str] = ()) -> LinkPlan:
    """Plan the writes for an owner whose match key was just written.

    Every current holder is pulled, whatever its match value, and every
    match receives a set-add. A holder that still matches is therefore
    pulled and re-added.

    Args:
        matched_ids: Counterparts whose match field equals the owner's key.
        holder_ids: Counterparts currently referencing the owner. Empty for
            a newly created owner.

    Returns:
        The plan to apply.
    """
    matched = _unique(matched_ids)
    return LinkPlan(
        references=matched,
        pull_from=_unique(holder_ids),
        add_to=list(matched),
    )
