"""Declarative callback routing utilities."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List

from telegram import Update
from telegram.ext import ContextTypes

CallbackHandlerFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[object]]


@dataclass
class PrefixRoute:
    """Route definition for prefix-based matches."""

    prefix: str
    handler: CallbackHandlerFn


class CallbackRouter:
    """Routes callback query data to async handlers.

    Exact tokens win over prefixes; prefixes are tried in registration order.
    """

    def __init__(self, default_handler: CallbackHandlerFn) -> None:
        self._default_handler = default_handler
        self._exact_routes: Dict[str, CallbackHandlerFn] = {}
        self._prefix_routes: List[PrefixRoute] = []

    def add_exact(self, token: str, handler: CallbackHandlerFn) -> None:
        self._exact_routes[token] = handler

    def add_prefix(self, prefix: str, handler: CallbackHandlerFn) -> None:
        self._prefix_routes.append(PrefixRoute(prefix=prefix, handler=handler))

    async def dispatch(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        query = update.callback_query
        if not query or not query.data:
            await self._default_handler(update, context)
            return

        data = query.data

        handler = self._exact_routes.get(data)
        if handler:
            await handler(update, context)
            return

        for route in self._prefix_routes:
            if data.startswith(route.prefix):
                await route.handler(update, context)
                return

        await self._default_handler(update, context)


__all__ = [
    "CallbackRouter",
    "PrefixRoute",
]
