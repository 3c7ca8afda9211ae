"""Reusable message handling components for bot workflows."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from telegram import Message
from telegram.error import RetryAfter


class MessageResponder:
    """Low-level helpers for replying/editing Telegram messages."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger('MessageHandlers')

    async def edit_callback_message(
        self,
        callback_query,
        text: str,
        *,
        retries: int = 1,
        retry_padding: float = 0.5,
        logger: Optional[logging.Logger] = None,
        **kwargs: Any,
    ) -> None:
        attempts = 0
        wait_time = 0.0
        target_logger = logger or self._logger

        while attempts <= retries:
            if wait_time > 0:
                await asyncio.sleep(wait_time)

            try:
                await callback_query.edit_message_text(text, **kwargs)
                return
            except RetryAfter as exc:
                attempts += 1
                if attempts > retries:
                    raise

                wait_time = float(getattr(exc, 'retry_after', 1)) + max(retry_padding, 0)
                target_logger.warning(
                    'Telegram rate limit triggered while editing message; retrying in %.1fs',
                    wait_time,
                )


async def delete_message_safe(message: Message) -> bool:
    """Delete a message, returning ``False`` when Telegram refuses."""

    try:
        await message.delete()
        return True
    except Exception as exc:
        logging.getLogger('MessageHandlers').debug("Failed to delete message: %s", exc)
        return False
