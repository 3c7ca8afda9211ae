"""Utilities to register Telegram command and callback handlers."""

from __future__ import annotations

from telegram.ext import Application, CallbackQueryHandler, CommandHandler, MessageHandler, filters


def register_core_handlers(application: Application, bot) -> None:
    """Wire up the bot's core command, callback, text and error handlers."""

    application.add_handler(CommandHandler("start", bot.start_command))
    application.add_handler(CommandHandler("admin", bot.admin_command))
    application.add_handler(CommandHandler("logout", bot.logout_command))
    application.add_handler(CommandHandler("cancel", bot.cancel_command))
    application.add_handler(CallbackQueryHandler(bot.callback_handler.handle_callback))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, bot.callback_handler.handle_text))
    application.add_error_handler(bot.error_handler)


__all__ = ['register_core_handlers']
