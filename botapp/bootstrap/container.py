"""Dependency container wiring bot runtime components together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from infrastructure.blob_store import JsonBlobStore, MemoryBlobStore
from reservations.app_state import ApplicationState
from reservations.store import BookingRepository, BookingStore

from botapp.config import BotAppConfig
from botapp.handlers.callback_handlers import CallbackHandler


@dataclass(frozen=True)
class BotDependencies:
    """Concrete dependency snapshot for the Telegram bot runtime."""

    config: BotAppConfig
    blob_store: Any
    booking_store: BookingStore
    callback_handler: CallbackHandler

    def as_dict(self) -> Dict[str, Any]:
        """Return dependencies as a mapping keyed by attribute name."""

        return {
            'config': self.config,
            'blob_store': self.blob_store,
            'booking_store': self.booking_store,
            'callback_handler': self.callback_handler,
        }


class DependencyContainer:
    """Lazy dependency container with optional override support.

    One :class:`BookingStore` is shared by every chat; each chat gets its own
    :class:`ApplicationState` so admin login and staged deletes stay local.
    """

    def __init__(
        self,
        config: BotAppConfig,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.config = config
        self.logger = logging.getLogger('TelegramBot')
        self._cache: Dict[str, Any] = {}
        # One entry per chat seen, kept until teardown
        self._states: Dict[int, ApplicationState] = {}
        if overrides:
            self._cache.update(overrides)

    # ------------------------------------------------------------------
    # Internal helpers
    def _resolve(self, key: str, factory: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = factory()
        return self._cache[key]

    # ------------------------------------------------------------------
    # Core dependencies
    @property
    def blob_store(self) -> Any:
        def factory() -> Any:
            storage_file = self.config.paths.storage_file
            if not storage_file:
                self.logger.warning("No storage file configured; bookings are kept in memory only")
                return MemoryBlobStore()
            return JsonBlobStore(storage_file)

        return self._resolve('blob_store', factory)

    @property
    def booking_store(self) -> BookingStore:
        def factory() -> BookingStore:
            store = BookingStore(BookingRepository(self.blob_store))
            store.hydrate()
            return store

        return self._resolve('booking_store', factory)

    def app_state(self, chat_id: int) -> ApplicationState:
        """Return (creating on first use) the state owned by ``chat_id``."""

        state = self._states.get(chat_id)
        if state is None:
            state = ApplicationState.initialize(self.blob_store, store=self.booking_store)
            self._states[chat_id] = state
            self.logger.debug("Created application state for chat %s", chat_id)
        return state

    @property
    def callback_handler(self) -> CallbackHandler:
        def factory() -> CallbackHandler:
            return CallbackHandler(self.app_state, timezone=self.config.timezone)

        return self._resolve('callback_handler', factory)

    # ------------------------------------------------------------------
    def build_dependencies(self) -> BotDependencies:
        """Materialise and return all core dependencies."""

        return BotDependencies(
            config=self.config,
            blob_store=self.blob_store,
            booking_store=self.booking_store,
            callback_handler=self.callback_handler,
        )

    def teardown(self) -> None:
        """Tear down every chat state; each teardown flushes the shared store."""

        for chat_id, state in list(self._states.items()):
            state.teardown()
            self.logger.debug("Tore down application state for chat %s", chat_id)
        self._states.clear()


__all__ = ['BotDependencies', 'DependencyContainer']
