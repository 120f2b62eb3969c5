# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cascade domain package: removal of dangling references after deletes."""

from src.domains.cascade.service import CascadeDeleter

__all__ = ["CascadeDeleter"]
