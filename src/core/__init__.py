# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package for the School Records API.

This package contains cross-cutting application concerns:
- config: Application configuration and settings
"""
