"""Shared mixins for handler utilities."""

from __future__ import annotations

from typing import Optional

from telegram import Update

from botapp.messages.message_handlers import MessageHandlers
from reservations.app_state import ApplicationState


def chat_id_of(update: Update) -> int:
    """Return the chat id of an update, falling back to the user id."""

    chat = getattr(update, "effective_chat", None)
    if chat is not None:
        return chat.id
    return update.effective_user.id


class CallbackResponseMixin:
    """Provides helpers for answering, editing and replying to Telegram updates.

    Expects ``self.logger`` and ``self.deps`` to be set by the handler.
    """

    async def _edit_callback_message(self, query, text: str, **kwargs) -> None:
        await MessageHandlers.edit_callback_message(
            query,
            text,
            logger=self.logger,
            **kwargs,
        )

    async def _respond(self, update: Update, text: str, **kwargs) -> None:
        """Edit the pressed message for callbacks, reply for typed input."""

        kwargs.setdefault('parse_mode', 'Markdown')
        if update.callback_query:
            await self._edit_callback_message(update.callback_query, text, **kwargs)
        elif update.message:
            await update.message.reply_text(text, **kwargs)
        else:
            self.logger.warning("No message or callback query available for reply")

    @staticmethod
    def _chat_id(update: Update) -> int:
        return chat_id_of(update)

    def _state(self, update: Update) -> ApplicationState:
        return self.deps.state_for(self._chat_id(update))


__all__ = ["CallbackResponseMixin", "chat_id_of"]
