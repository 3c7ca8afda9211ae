"""Booking dialog views: prompts, booking details and delete confirmation."""

from __future__ import annotations

from typing import List, Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from botapp.messages import strings
from botapp.ui import callback_data
from botapp.ui.calendar import parse_date_key
from botapp.ui.text_blocks import MarkdownBlockBuilder, escape_telegram_markdown
from infrastructure.constants import format_date_label


def _slot_heading(date_key: str, time_slot: str) -> str:
    return f"{format_date_label(parse_date_key(date_key))} {time_slot}"


def format_dialog_prompt(
    title: str,
    date_key: str,
    time_slot: str,
    prompt: str,
    *,
    error: Optional[str] = None,
) -> str:
    """Render one step of a booking dialog, with the last rejection on top."""

    builder = MarkdownBlockBuilder()
    builder.heading(title)
    builder.line(_slot_heading(date_key, time_slot))
    builder.blank()
    if error:
        builder.line(error)
        builder.blank()
    builder.line(prompt)
    return builder.build()


def create_dialog_cancel_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(strings.BUTTON_CANCEL, callback_data=callback_data.CLOSE_DIALOG)]
    ])


def create_skip_message_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(strings.BUTTON_SKIP_MESSAGE, callback_data=callback_data.SKIP_MESSAGE)],
        [InlineKeyboardButton(strings.BUTTON_CANCEL, callback_data=callback_data.CLOSE_DIALOG)],
    ])


def format_booking_details(
    date_key: str,
    time_slot: str,
    name: str,
    message: Optional[str],
    *,
    is_admin: bool = False,
    notice: Optional[str] = None,
) -> str:
    """Show a booking once its message may be revealed."""

    builder = MarkdownBlockBuilder()
    builder.heading(strings.TITLE_EDIT_BOOKING)
    builder.line(_slot_heading(date_key, time_slot))
    builder.blank()
    if notice:
        builder.line(notice)
        builder.blank()
    builder.line(f"*{strings.LABEL_NAME}*: {escape_telegram_markdown(name)}")
    message_label = strings.LABEL_ADMIN_MESSAGE if is_admin else strings.LABEL_MESSAGE
    builder.line(f"*{message_label}*:")
    builder.line(escape_telegram_markdown(message) if message else strings.LABEL_NO_MESSAGE)
    return builder.build()


def create_edit_keyboard(*, read_only: bool = False) -> InlineKeyboardMarkup:
    """Visitor edit actions; the admin view only offers closing."""

    keyboard: List[List[InlineKeyboardButton]] = []
    if not read_only:
        keyboard.append([
            InlineKeyboardButton(strings.BUTTON_EDIT_NAME, callback_data=callback_data.EDIT_NAME),
            InlineKeyboardButton(strings.BUTTON_EDIT_MESSAGE, callback_data=callback_data.EDIT_MESSAGE),
        ])
        keyboard.append([
            InlineKeyboardButton(strings.BUTTON_SAVE, callback_data=callback_data.SAVE_BOOKING),
            InlineKeyboardButton(strings.BUTTON_DELETE, callback_data=callback_data.DELETE_BOOKING),
        ])
    keyboard.append([InlineKeyboardButton(strings.BUTTON_CLOSE, callback_data=callback_data.CLOSE_DIALOG)])
    return InlineKeyboardMarkup(keyboard)


def format_confirm_delete_message(date_key: str, time_slot: str, name: str) -> str:
    builder = MarkdownBlockBuilder()
    builder.heading(strings.TITLE_CONFIRM_DELETE)
    builder.line(_slot_heading(date_key, time_slot))
    builder.line(f"*{strings.LABEL_NAME}*: {escape_telegram_markdown(name)}")
    builder.blank()
    builder.line(strings.CONFIRM_DELETE_QUESTION)
    return builder.build()


def create_confirm_delete_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(strings.BUTTON_CANCEL, callback_data=callback_data.CANCEL_DELETE),
            InlineKeyboardButton(strings.BUTTON_CONFIRM_DELETE, callback_data=callback_data.CONFIRM_DELETE),
        ]
    ])


__all__ = [
    'create_confirm_delete_keyboard',
    'create_dialog_cancel_keyboard',
    'create_edit_keyboard',
    'create_skip_message_keyboard',
    'format_booking_details',
    'format_confirm_delete_message',
    'format_dialog_prompt',
]
