"""Validation helpers for booking operations."""

from __future__ import annotations

from typing import Optional

from infrastructure.constants import is_known_slot
from reservations.errors import AuthError, CapacityError, ValidationError


def ensure_known_slot(date: str, time: str) -> None:
    """Raise ``ValidationError`` unless the pair belongs to the calendar."""

    if not is_known_slot(date, time):
        raise ValidationError("unknown slot")


def ensure_name(name: Optional[str]) -> str:
    """Return the trimmed name or raise when nothing is left."""

    trimmed = (name or '').strip()
    if not trimmed:
        raise ValidationError("missing name")
    return trimmed


def ensure_password(password: Optional[str]) -> str:
    if not password:
        raise ValidationError("missing password")
    return password


def ensure_slot_available(count: int, capacity: int) -> None:
    if count >= capacity:
        raise CapacityError("slot full")


def ensure_password_matches(expected: str, supplied: Optional[str]) -> None:
    """Case-sensitive plaintext comparison."""

    if supplied is None or supplied != expected:
        raise AuthError("password mismatch")
