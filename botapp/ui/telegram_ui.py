"""Facade for Telegram UI helpers."""

from __future__ import annotations

from .admin import (
    create_admin_login_keyboard as _create_admin_login_keyboard,
    format_admin_login_prompt as _format_admin_login_prompt,
)
from .booking import (
    create_confirm_delete_keyboard as _create_confirm_delete_keyboard,
    create_dialog_cancel_keyboard as _create_dialog_cancel_keyboard,
    create_edit_keyboard as _create_edit_keyboard,
    create_skip_message_keyboard as _create_skip_message_keyboard,
    format_booking_details as _format_booking_details,
    format_confirm_delete_message as _format_confirm_delete_message,
    format_dialog_prompt as _format_dialog_prompt,
)
from .calendar import (
    create_day_keyboard as _create_day_keyboard,
    create_home_keyboard as _create_home_keyboard,
    create_slot_keyboard as _create_slot_keyboard,
    format_day_message as _format_day_message,
    format_home_message as _format_home_message,
    format_slot_message as _format_slot_message,
)


class TelegramUI:
    """Facade mapping to modular UI helpers."""

    create_home_keyboard = staticmethod(_create_home_keyboard)
    create_day_keyboard = staticmethod(_create_day_keyboard)
    create_slot_keyboard = staticmethod(_create_slot_keyboard)

    create_dialog_cancel_keyboard = staticmethod(_create_dialog_cancel_keyboard)
    create_skip_message_keyboard = staticmethod(_create_skip_message_keyboard)
    create_edit_keyboard = staticmethod(_create_edit_keyboard)
    create_confirm_delete_keyboard = staticmethod(_create_confirm_delete_keyboard)

    create_admin_login_keyboard = staticmethod(_create_admin_login_keyboard)

    format_home_message = staticmethod(_format_home_message)
    format_day_message = staticmethod(_format_day_message)
    format_slot_message = staticmethod(_format_slot_message)
    format_dialog_prompt = staticmethod(_format_dialog_prompt)
    format_booking_details = staticmethod(_format_booking_details)
    format_confirm_delete_message = staticmethod(_format_confirm_delete_message)
    format_admin_login_prompt = staticmethod(_format_admin_login_prompt)


__all__ = ['TelegramUI']
