"""
Centralized Error Handling System for the booking bot
Turns exceptions escaping the handlers into logs and a visitor-facing reply
"""

import logging
from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import ContextTypes

from botapp.messages import strings
from botapp.ui import callback_data
from reservations.errors import BookingError


def _back_to_calendar_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(strings.BUTTON_BACK_TO_CALENDAR, callback_data=callback_data.HOME)]
    ])


class ErrorHandler:
    """
    Centralized error handling for the booking bot

    Provides static methods for handling different types of errors
    with appropriate user messaging and logging
    """

    @staticmethod
    async def handle_telegram_error(update: Optional[Update], context: ContextTypes.DEFAULT_TYPE, error: Exception) -> None:
        """
        Main entry point for handling errors that occur during Telegram updates

        Booking rejections that escaped a handler are shown as rejections;
        anything else is logged with its traceback and answered with a
        generic message and a way back to the calendar.

        Args:
            update: The telegram update that caused the error
            context: The callback context
            error: The exception that occurred

        Returns:
            None
        """
        logger = logging.getLogger('ErrorHandler')

        if "message is not modified" in str(error).lower():
            # Users pressing the same button twice
            logger.warning(f"Telegram message not modified: {error}")
            return

        if isinstance(error, BookingError):
            await ErrorHandler.handle_booking_error(update, context, error)
            return

        logger.error(f"Telegram error occurred: {type(error).__name__}: {error}", exc_info=error)

        if update and update.effective_user:
            logger.error(f"Error context - User ID: {update.effective_user.id}")

        if not update:
            logger.warning("No update object available - cannot send error message to user")
            return

        await ErrorHandler._send(update, strings.UNEXPECTED_ERROR)

    @staticmethod
    async def handle_booking_error(update: Optional[Update], context: ContextTypes.DEFAULT_TYPE,
                                   error: BookingError) -> None:
        """
        Surface a booking rejection to the visitor

        Args:
            update: The telegram update that caused the error
            context: The callback context
            error: The rejection raised by the booking core

        Returns:
            None
        """
        logger = logging.getLogger('ErrorHandler')
        user_id = update.effective_user.id if update and update.effective_user else "Unknown"
        logger.warning(f"Booking rejection - User: {user_id}, Kind: {error.kind}, Reason: {error.reason}")

        if not update:
            return
        await ErrorHandler._send(update, strings.rejection_text(error))

    @staticmethod
    async def _send(update: Update, text: str) -> None:
        logger = logging.getLogger('ErrorHandler')
        reply_markup = _back_to_calendar_keyboard()
        try:
            if update.callback_query:
                await update.callback_query.edit_message_text(text, reply_markup=reply_markup)
            elif update.message:
                await update.message.reply_text(text, reply_markup=reply_markup)
            else:
                logger.warning("Unable to send error message - no callback query or message available")
        except Exception as send_error:
            logger.error(f"Failed to send error message to user: {send_error}", exc_info=True)
