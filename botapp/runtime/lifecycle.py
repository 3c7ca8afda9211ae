"""Lifecycle orchestration for the Telegram bot runtime."""

from __future__ import annotations

import logging
from typing import Optional

from botapp.bootstrap import BotDependencies, DependencyContainer


class LifecycleManager:
    """Manage startup and shutdown for the bot runtime."""

    def __init__(
        self,
        container: DependencyContainer,
        dependencies: BotDependencies,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.container = container
        self.dependencies = dependencies
        self.logger = logger or logging.getLogger('TelegramBot')
        self.application = None

    async def post_init(self, application) -> None:
        """Record the application and log the hydrated store size."""

        self.application = application
        self.log_metrics()
        self.logger.info("Bot started successfully - awaiting messages...")

    async def post_stop(self, application) -> None:
        """Tear down chat states and flush bookings to disk."""

        self.logger.info("🔴 Starting bot shutdown sequence...")
        self.container.teardown()
        if not self.dependencies.booking_store.last_persist_ok:
            self.logger.warning("⚠️ Last booking write failed; in-memory bookings may be lost")
        self.logger.info("✅ Bot shutdown sequence completed")
        self.application = None

    def log_metrics(self) -> None:
        """Log how many bookings the shared store currently holds."""

        bookings = self.dependencies.booking_store.snapshot()
        self.logger.info(
            "📊 Bookings loaded: %s (storage: %s)",
            len(bookings),
            self.dependencies.config.paths.storage_file,
        )
