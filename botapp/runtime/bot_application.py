"""Telegram bot runtime application wiring."""

from __future__ import annotations

import logging
from typing import Optional

from telegram import Update
from telegram.ext import Application, ContextTypes

from botapp.bootstrap.container import DependencyContainer
from botapp.commands import register_core_handlers
from botapp.config import BotAppConfig, load_bot_config
from botapp.error_handler import ErrorHandler
from botapp.runtime.lifecycle import LifecycleManager


class BotApplication:
    """Assemble dependencies and handlers for the Telegram bot runtime."""

    def __init__(
        self,
        config: Optional[BotAppConfig] = None,
        *,
        container: Optional[DependencyContainer] = None,
    ) -> None:
        self.logger = logging.getLogger('TelegramBot')
        self.config = config or load_bot_config()
        self.token = self.config.telegram.token
        self.container = container or DependencyContainer(self.config)
        dependencies = self.container.build_dependencies()

        self.booking_store = dependencies.booking_store
        self.callback_handler = dependencies.callback_handler
        self.lifecycle = LifecycleManager(self.container, dependencies, logger=self.logger)
        self.application = None

    async def start_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start command: show the calendar home."""

        await self.callback_handler.calendar.handle_home(update, context)

    async def admin_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /admin command: open the admin login dialog."""

        await self.callback_handler.admin.handle_admin_login(update, context)

    async def logout_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /logout command."""

        await self.callback_handler.admin.handle_admin_logout(update, context)

    async def cancel_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /cancel command: close any open dialog."""

        await self.callback_handler.handle_cancel(update, context)

    async def error_handler(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Central error handler for Telegram exceptions."""

        error = context.error
        await ErrorHandler.handle_telegram_error(
            update if isinstance(update, Update) else None,
            context,
            error,
        )

    def run(self) -> None:
        """Run the Telegram bot using asyncio-ready Application."""

        if not self.token:
            raise RuntimeError("TELEGRAM_BOT_TOKEN is not configured")

        app = Application.builder().token(self.token).build()
        register_core_handlers(app, self)

        app.post_init = self._post_init
        app.post_stop = self._post_stop

        self.application = app
        self.logger.info("Starting async bot...")
        app.run_polling()

    async def _post_init(self, application) -> None:
        """Initialize async components after the Telegram app starts."""

        await self.lifecycle.post_init(application)
        self.application = application

    async def _post_stop(self, application) -> None:
        """Clean up after the Telegram app stops."""

        await self.lifecycle.post_stop(application)
        self.application = None


__all__ = ['BotApplication']
