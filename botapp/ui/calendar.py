"""Calendar, day and slot views for the Telegram UI."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

import pytz
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from botapp.messages import strings
from botapp.ui import callback_data
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown
from infrastructure.constants import (
    CALENDAR_DATES,
    DATE_FORMAT,
    FOOTER_TEXT,
    MESSAGE_PREVIEW_LENGTH,
    SUBTITLE,
    TITLE,
    format_date_label,
)
from reservations.models import Booking


def local_today(timezone_name: str) -> date:
    """Return today's date in the configured timezone."""

    return datetime.now(pytz.timezone(timezone_name)).date()


def parse_date_key(date_key: str) -> date:
    return datetime.strptime(date_key, DATE_FORMAT).date()


def format_home_message(*, is_admin: bool = False) -> str:
    builder = MarkdownBlockBuilder()
    builder.heading(TITLE)
    builder.blank()
    builder.line(escape_telegram_markdown(SUBTITLE))
    builder.blank()
    builder.line(strings.PROMPT_SELECT_DATE)
    if is_admin:
        builder.line(strings.LABEL_ADMIN_MODE)
    builder.blank()
    builder.line(f"_{escape_telegram_markdown(FOOTER_TEXT)}_")
    return builder.build()


def create_home_keyboard(*, is_admin: bool = False, today: Optional[date] = None) -> InlineKeyboardMarkup:
    """One button per calendar date plus the admin login/logout toggle."""

    keyboard = []
    for day in CALENDAR_DATES:
        label = format_date_label(day)
        if today is not None and day == today:
            label = f"{strings.LABEL_TODAY} {label}"
        keyboard.append([
            InlineKeyboardButton(label, callback_data=callback_data.day(day.strftime(DATE_FORMAT)))
        ])

    if is_admin:
        keyboard.append([InlineKeyboardButton(strings.BUTTON_LOGOUT, callback_data=callback_data.ADMIN_LOGOUT)])
    else:
        keyboard.append([InlineKeyboardButton(strings.BUTTON_ADMIN, callback_data=callback_data.ADMIN_LOGIN)])
    return InlineKeyboardMarkup(keyboard)


def format_day_message(date_key: str) -> str:
    builder = MarkdownBlockBuilder()
    builder.heading(format_date_label(parse_date_key(date_key)))
    builder.blank()
    builder.line(strings.PROMPT_SELECT_TIME)
    return builder.build()


def format_slot_button_label(time_slot: str, count: int, capacity: int) -> str:
    label = f"{time_slot}  {count}/{capacity}"
    if count >= capacity:
        label = f"{label} {strings.BUTTON_FULL_SUFFIX}"
    return label


def create_day_keyboard(
    date_key: str,
    occupancy: Sequence[Tuple[str, int]],
    capacity: int,
    *,
    columns: int = 2,
) -> InlineKeyboardMarkup:
    """Time slot grid for one date; every slot opens its slot view."""

    keyboard: List[List[InlineKeyboardButton]] = []
    row: List[InlineKeyboardButton] = []
    for time_slot, count in occupancy:
        row.append(
            InlineKeyboardButton(
                format_slot_button_label(time_slot, count, capacity),
                callback_data=callback_data.slot(date_key, time_slot),
            )
        )
        if len(row) == columns:
            keyboard.append(row)
            row = []
    if row:
        keyboard.append(row)

    keyboard.append([InlineKeyboardButton(strings.BUTTON_BACK_TO_CALENDAR, callback_data=callback_data.HOME)])
    return InlineKeyboardMarkup(keyboard)


def format_booking_button_label(booking: Booking, *, is_admin: bool) -> str:
    """Visitors see names only; admins also get a short message preview."""

    if not is_admin or not booking.message:
        return booking.name
    return f"{booking.name} ({booking.message_preview(MESSAGE_PREVIEW_LENGTH)})"


def format_slot_message(
    date_key: str,
    time_slot: str,
    bookings: Sequence[Booking],
    capacity: int,
    *,
    notice: Optional[str] = None,
) -> str:
    builder = MarkdownBlockBuilder()
    if notice:
        builder.line(notice)
        builder.blank()
    builder.heading(f"{format_date_label(parse_date_key(date_key))} {time_slot}")
    builder.line(f"{len(bookings)}/{capacity}")
    builder.blank()
    if bookings:
        builder.bullets(escape_telegram_markdown(booking.name) for booking in bookings)
    else:
        builder.line(strings.LABEL_NO_BOOKINGS)

    if len(bookings) >= capacity:
        builder.blank()
        builder.line(f"*{strings.SLOT_FULL_TITLE}*: {strings.SLOT_FULL_DETAIL}")
    return builder.build()


def create_slot_keyboard(
    date_key: str,
    time_slot: str,
    bookings: Sequence[Booking],
    capacity: int,
    *,
    is_admin: bool = False,
) -> InlineKeyboardMarkup:
    keyboard = [
        [
            InlineKeyboardButton(
                format_booking_button_label(booking, is_admin=is_admin),
                callback_data=callback_data.open_booking(booking.id),
            )
        ]
        for booking in bookings
    ]

    if len(bookings) < capacity:
        keyboard.append([
            InlineKeyboardButton(strings.BUTTON_RESERVE, callback_data=callback_data.reserve(date_key, time_slot))
        ])

    keyboard.append([InlineKeyboardButton(strings.BUTTON_BACK_TO_DAY, callback_data=callback_data.day(date_key))])
    return InlineKeyboardMarkup(keyboard)


__all__ = [
    'create_day_keyboard',
    'create_home_keyboard',
    'create_slot_keyboard',
    'format_booking_button_label',
    'format_day_message',
    'format_home_message',
    'format_slot_button_label',
    'format_slot_message',
    'local_today',
    'parse_date_key',
]
