#!/usr/bin/env python3
"""
Async telegram bot - entrypoint wrappers around the runtime application.
"""

import logging
import sys
from pathlib import Path

if __name__ == "__main__" and __package__ is None:
    sys.path.append(str(Path(__file__).resolve().parents[1]))
    __package__ = "botapp"

import logging_config

from botapp.config import load_bot_config
from botapp.runtime import BotApplication


def main() -> None:
    """Entry point used by both CLI script and module execution."""

    config = load_bot_config()
    logging_config.setup_logging(production_mode=config.telegram.production_mode)

    logger = logging.getLogger('Main')
    logger.info("=" * 50)
    logger.info("Exhibition Booking Bot")
    logger.info("=" * 50)

    bot = BotApplication(config)

    try:
        logger.info("🚀 Starting bot...")
        bot.run()
    except KeyboardInterrupt:
        logger.info("✅ Stopped by user (Ctrl+C)")
    except Exception as exc:
        logger.error("❌ Error: %s", exc, exc_info=True)
        raise


if __name__ == '__main__':
    main()
