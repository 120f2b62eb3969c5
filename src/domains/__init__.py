# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for the School Records API.

Each domain module provides a service that orchestrates store operations
and raises domain exceptions the API layer maps to HTTP responses.

Domains:
    relationships: Recompute-on-write links between students, instructors and courses.
    cascade: Removal of dangling references after deletes.
    student, instructor, course: Entity CRUD driving the relationship links.
    library: Book CRUD and the lending ledger.
    player, attendance: Independent collections.
"""
