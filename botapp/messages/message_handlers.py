"""
Message handling helper functions
Common patterns for handling Telegram messages and updates
"""

from typing import Any, Optional
import logging

from telegram import CallbackQuery, Message

from botapp.messages.components import MessageResponder, delete_message_safe


_responder = MessageResponder()


class MessageHandlers:
    """Collection of message handling helpers"""

    @staticmethod
    async def edit_callback_message(
        callback_query: CallbackQuery,
        text: str,
        *,
        retries: int = 1,
        retry_padding: float = 0.5,
        logger: Optional[logging.Logger] = None,
        **kwargs: Any,
    ) -> None:
        """Edit a callback message while gracefully handling rate limits."""
        target_logger = logger or logging.getLogger('MessageHandlers')
        await _responder.edit_callback_message(
            callback_query,
            text,
            retries=retries,
            retry_padding=retry_padding,
            logger=target_logger,
            **kwargs,
        )

    @staticmethod
    async def delete_message_safe(message: Message) -> bool:
        """Safely delete a message (used to hide typed passwords)"""
        return await delete_message_safe(message)
