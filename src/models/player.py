# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Player API schemas."""

from typing import Annotated

from pydantic import Field

from src.models.common import CamelModel, DocumentResponse, at_least, not_blank

FirstName = Annotated[str, not_blank("First name is required")]
LastName = Annotated[str, not_blank("Last name is required")]
Country = Annotated[str, not_blank("Country is required")]
Gender = Annotated[str, not_blank("Gender is required")]
Age = Annotated[int, at_least(1, "Age must be a positive integer")]
Position = Annotated[str, not_blank("Position is required")]
Goals = Annotated[int, at_least(0, "Goals must not be a negative integer")]


class PlayerCreateRequest(CamelModel):
    """Request to create a player."""

    first_name: FirstName
    last_name: LastName
    country_name: Country
    gender: Gender
    age: Age
    position: Position
    goals: Goals = 0


class PlayerUpdateRequest(CamelModel):
    """Partial player update."""

    first_name: FirstName | None = None
    last_name: LastName | None = None
    country_name: Country | None = None
    gender: Gender | None = None
    age: Age | None = None
    position: Position | None = None
    goals: Goals | None = None


class PlayerResponse(DocumentResponse):
    """Player document."""

    first_name: str
    last_name: str
    country_name: str
    gender: str
    age: int
    position: str
    goals: int = Field(default=0)
