"""Telegram application layer with lazy exports to avoid heavy imports."""

__all__ = ["BotApplication"]


def __getattr__(name):
    if name == "BotApplication":
        from .runtime.bot_application import BotApplication as _BotApplication

        return _BotApplication
    raise AttributeError(f"module 'botapp' has no attribute {name!r}")
