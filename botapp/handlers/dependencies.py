"""Shared dependency container for callback domain handlers."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable

from reservations.app_state import ApplicationState


@dataclass
class CallbackDependencies:
    logger: Any
    state_provider: Callable[[int], ApplicationState]
    timezone: str = "Asia/Seoul"

    def state_for(self, chat_id: int) -> ApplicationState:
        """Return the application state owned by ``chat_id``."""

        return self.state_provider(chat_id)


__all__ = ["CallbackDependencies"]
