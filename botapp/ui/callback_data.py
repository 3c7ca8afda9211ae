"""Callback data tokens shared by keyboards and the callback router."""

from __future__ import annotations

from typing import Optional, Tuple

HOME = 'home'
ADMIN_LOGIN = 'admin_login'
ADMIN_LOGOUT = 'admin_logout'
CLOSE_DIALOG = 'close_dialog'
SKIP_MESSAGE = 'skip_message'
EDIT_NAME = 'edit_name'
EDIT_MESSAGE = 'edit_message'
SAVE_BOOKING = 'save_booking'
DELETE_BOOKING = 'delete_booking'
CONFIRM_DELETE = 'confirm_delete'
CANCEL_DELETE = 'cancel_delete'

DAY_PREFIX = 'day_'
SLOT_PREFIX = 'slot_'
RESERVE_PREFIX = 'reserve_'
OPEN_PREFIX = 'open_'

_SEPARATOR = '_'


def day(date_key: str) -> str:
    return f"{DAY_PREFIX}{date_key}"


def slot(date_key: str, time_slot: str) -> str:
    return f"{SLOT_PREFIX}{date_key}{_SEPARATOR}{time_slot}"


def reserve(date_key: str, time_slot: str) -> str:
    return f"{RESERVE_PREFIX}{date_key}{_SEPARATOR}{time_slot}"


def open_booking(booking_id: str) -> str:
    return f"{OPEN_PREFIX}{booking_id}"


def parse_day(data: str) -> Optional[str]:
    if not data.startswith(DAY_PREFIX):
        return None
    return data[len(DAY_PREFIX):] or None


def parse_slot(data: str, prefix: str = SLOT_PREFIX) -> Optional[Tuple[str, str]]:
    """Split ``<prefix><date>_<time>`` into its date and time parts."""

    if not data.startswith(prefix):
        return None
    date_key, separator, time_slot = data[len(prefix):].partition(_SEPARATOR)
    if not separator or not date_key or not time_slot:
        return None
    return date_key, time_slot


def parse_open_booking(data: str) -> Optional[str]:
    if not data.startswith(OPEN_PREFIX):
        return None
    return data[len(OPEN_PREFIX):] or None
