"""Structured configuration loaders for the Telegram bot runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from infrastructure.settings import AppSettings, get_settings


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram-specific settings for the bot runtime."""

    token: str
    production_mode: bool


@dataclass(frozen=True)
class CalendarConfig:
    """Presentation settings for the calendar views."""

    timezone: str


@dataclass(frozen=True)
class PathsConfig:
    """File-system locations for persisted state."""

    data_directory: str
    storage_file: str


@dataclass(frozen=True)
class BotAppConfig:
    """Aggregated configuration snapshot for the Telegram bot."""

    telegram: TelegramConfig
    calendar: CalendarConfig
    paths: PathsConfig

    @property
    def timezone(self) -> str:
        return self.calendar.timezone


def _build_config_from_settings(settings: AppSettings) -> BotAppConfig:
    """Translate :class:`AppSettings` values into runtime config objects."""

    return BotAppConfig(
        telegram=TelegramConfig(
            token=settings.bot_token,
            production_mode=settings.production_mode,
        ),
        calendar=CalendarConfig(timezone=settings.timezone),
        paths=PathsConfig(
            data_directory=settings.data_directory,
            storage_file=settings.storage_file,
        ),
    )


def load_bot_config(settings: Optional[AppSettings] = None) -> BotAppConfig:
    """Load the Telegram bot configuration from shared application settings."""

    if settings is None:
        settings = get_settings()
    return _build_config_from_settings(settings)


__all__ = [
    'BotAppConfig',
    'CalendarConfig',
    'PathsConfig',
    'TelegramConfig',
    'load_bot_config',
]
