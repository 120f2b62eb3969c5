# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared API schema building blocks.

Payloads use camelCase field names on the wire (``favoriteSubject``,
``copiesAvailable``) and snake_case attributes in Python. Field validators
raise ``ValueError`` with a ready-to-display message; the API reports the
first failing field's message.
"""

from collections.abc import Callable
from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase aliases, populated from ORM objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def not_blank(message: str) -> AfterValidator:
    """Reject empty or whitespace-only strings."""

    def check(value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(message)
        return value

    return AfterValidator(check)


def at_least(minimum: int, message: str) -> AfterValidator:
    """Reject integers below ``minimum``."""

    def check(value: int) -> int:
        if value < minimum:
            raise ValueError(message)
        return value

    return AfterValidator(check)


def email_address(message: str = "Email is invalid") -> AfterValidator:
    """Validate an email address syntactically (no DNS lookup)."""

    def check(value: str) -> str:
        try:
            return validate_email(value, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise ValueError(message) from e

    return AfterValidator(check)


def satisfies(predicate: Callable[[str], bool], message: str) -> AfterValidator:
    """Reject strings for which ``predicate`` is false."""

    def check(value: str) -> str:
        if not predicate(value):
            raise ValueError(message)
        return value

    return AfterValidator(check)


class PersonSummary(CamelModel):
    """Display fields of a referenced student or instructor."""

    id: str = Field(description="Document ID")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    email: str | None = Field(default=None, description="Email address")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(description="Human-readable result")


class DocumentResponse(CamelModel):
    """Fields every stored document exposes."""

    id: str = Field(description="Document ID")
    created_at: datetime = Field(description="Creation timestamp")
