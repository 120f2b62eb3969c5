# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Player service. Players are standalone documents with no links."""

import logging
from collections.abc import Sequence

from src.domains.common import EntityNotFoundError, parse_id, present_changes
from src.infrastructure.database.models import Player
from src.infrastructure.database.store import SchoolStore
from src.models.player import PlayerCreateRequest, PlayerResponse, PlayerUpdateRequest

logger = logging.getLogger(__name__)


class PlayerNotFoundError(EntityNotFoundError):
    """Raised when player is not found."""

    pass


class PlayerService:
    """Service for managing players."""

    def __init__(self, store: SchoolStore) -> None:
        self.store = store

    async def create_players(
        self,
        requests: Sequence[PlayerCreateRequest],
    ) -> list[PlayerResponse]:
        players = await self.store.players.insert_many(
            [request.model_dump() for request in requests]
        )
        logger.info("Created %d player(s)", len(players))
        return [PlayerResponse.model_validate(player) for player in players]

    async def list_players(self) -> list[PlayerResponse]:
        players = await self.store.players.find_all()
        return [PlayerResponse.model_validate(player) for player in players]

    async def get_player(self, player_id: str) -> PlayerResponse:
        return PlayerResponse.model_validate(await self._get_player(player_id))

    async def update_player(
        self,
        player_id: str,
        request: PlayerUpdateRequest,
    ) -> PlayerResponse:
        player = await self._get_player(player_id)

        for field, value in present_changes(request.model_dump(exclude_unset=True)).items():
            setattr(player, field, value)
        await self.store.players.save(player)

        logger.info("Updated player: %s", player.id)
        return PlayerResponse.model_validate(player)

    async def delete_player(self, player_id: str) -> None:
        player = await self.store.players.delete_by_id(parse_id(player_id, "player"))
        if player is None:
            raise PlayerNotFoundError("Player not found")
        logger.info("Deleted player: %s", player.id)

    async def _get_player(self, player_id: str) -> Player:
        player = await self.store.players.find_by_id(parse_id(player_id, "player"))
        if player is None:
            raise PlayerNotFoundError("Player not found")
        return player
