# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Player API endpoints."""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import get_store
from src.domains.common import InvalidIdentifierError
from src.domains.player.service import PlayerNotFoundError, PlayerService
from src.infrastructure.database.store import SchoolStore
from src.models.common import MessageResponse
from src.models.player import PlayerCreateRequest, PlayerResponse, PlayerUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(store: SchoolStore) -> PlayerService:
    return PlayerService(store)


@router.post(
    "",
    response_model=list[PlayerResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create players",
)
async def create_players(
    data: PlayerCreateRequest | list[PlayerCreateRequest] = Body(...),
    store: SchoolStore = Depends(get_store),
) -> list[PlayerResponse]:
    requests = data if isinstance(data, list) else [data]
    return await _get_service(store).create_players(requests)


@router.get("", response_model=list[PlayerResponse], summary="List players")
async def list_players(
    store: SchoolStore = Depends(get_store),
) -> list[PlayerResponse]:
    return await _get_service(store).list_players()


@router.get("/{player_id}", response_model=PlayerResponse, summary="Get player")
async def get_player(
    player_id: str,
    store: SchoolStore = Depends(get_store),
) -> PlayerResponse:
    try:
        return await _get_service(store).get_player(player_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{player_id}", response_model=PlayerResponse, summary="Update player")
async def update_player(
    player_id: str,
    data: PlayerUpdateRequest,
    store: SchoolStore = Depends(get_store),
) -> PlayerResponse:
    try:
        return await _get_service(store).update_player(player_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{player_id}", response_model=MessageResponse, summary="Delete player")
async def delete_player(
    player_id: str,
    store: SchoolStore = Depends(get_store),
) -> MessageResponse:
    try:
        await _get_service(store).delete_player(player_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return MessageResponse(message="Player deleted successfully")
