"""School Records API.

CRUD service for students, instructors, courses, library books, players and
attendance, with recompute-on-write relationship synchronization between
students, instructors and courses, and a lending ledger for library books.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
