# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Player domain package."""

from src.domains.player.service import PlayerNotFoundError, PlayerService

__all__ = ["PlayerService", "PlayerNotFoundError"]
