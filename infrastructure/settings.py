"""Centralized application settings.

Runtime configuration values (bot token, storage location, timezone) are read
from the environment here, optionally seeded from a ``.env`` file. Booking
rules themselves are fixed in :mod:`infrastructure.constants`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Normalize environment strings such as "true"/"1" into booleans."""

    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppSettings:
    """Immutable snapshot of high-level configuration values."""

    bot_token: str
    production_mode: bool
    timezone: str
    data_directory: str
    storage_file: str


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Load configuration from the environment and fall back to defaults."""

    if env is None:
        load_dotenv(override=False)
        env = os.environ

    bot_token = env.get("TELEGRAM_BOT_TOKEN", "")
    production_mode = _to_bool(env.get("PRODUCTION_MODE", "false"), default=False)
    timezone = env.get("BOT_TIMEZONE", "Asia/Seoul")

    data_directory = env.get("DATA_DIRECTORY", "data")
    storage_file = env.get(
        "STORAGE_FILE",
        os.path.join(data_directory, "storage.json"),
    )

    return AppSettings(
        bot_token=bot_token,
        production_mode=production_mode,
        timezone=timezone,
        data_directory=data_directory,
        storage_file=storage_file,
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached :class:`AppSettings` instance."""

    return load_settings()
