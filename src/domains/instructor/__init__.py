# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Instructor domain package."""

from src.domains.instructor.service import InstructorNotFoundError, InstructorService

__all__ = ["InstructorService", "InstructorNotFoundError"]
