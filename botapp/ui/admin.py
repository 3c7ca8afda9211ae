"""Admin-specific Telegram UI helpers."""

from __future__ import annotations

from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from botapp.messages import strings
from botapp.ui import callback_data
from botapp.ui.text_blocks import MarkdownBlockBuilder


def format_admin_login_prompt(error: Optional[str] = None) -> str:
    builder = MarkdownBlockBuilder()
    builder.heading(strings.TITLE_ADMIN_LOGIN)
    builder.blank()
    if error:
        builder.line(f"⚠️ {error}")
        builder.blank()
    builder.line(strings.PROMPT_ADMIN_PASSWORD)
    return builder.build()


def create_admin_login_keyboard() -> InlineKeyboardMarkup:
    """Create the admin login keyboard."""

    return InlineKeyboardMarkup([
        [InlineKeyboardButton(strings.BUTTON_CANCEL, callback_data=callback_data.CLOSE_DIALOG)]
    ])


__all__ = ['create_admin_login_keyboard', 'format_admin_login_prompt']
