#!/usr/bin/env python3
"""
Logging configuration for the exhibition booking bot
Console output plus rotating log files for the bot and the booking core
"""

import os
import logging
import logging.handlers
from datetime import datetime
from typing import Optional

# Define the log directory to be a fixed 'latest_log'
LOG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'logs', 'latest_log')

# Loggers whose records also go to the dedicated bookings log
BOOKING_LOGGERS = ('BookingStore', 'BookingRepository', 'BookingLifecycle', 'AdminSession', 'BlobStore')

# Loggers owned by the Telegram layer
BOT_LOGGERS = ('TelegramBot', 'CallbackHandler', 'ErrorHandler')


def _production_mode_from_env() -> bool:
    return os.getenv('PRODUCTION_MODE', 'false').lower() == 'true'


def setup_logging(production_mode: Optional[bool] = None, log_dir: str = LOG_DIR) -> None:
    """
    Set up console and rotating file handlers.

    Args:
        production_mode: Quieter levels when true; read from PRODUCTION_MODE when omitted
        log_dir: Directory receiving bot.log, bot_errors.log and bookings.log
    """
    if production_mode is None:
        production_mode = _production_mode_from_env()

    os.makedirs(log_dir, exist_ok=True)

    main_log_file = os.path.join(log_dir, 'bot.log')
    error_log_file = os.path.join(log_dir, 'bot_errors.log')
    bookings_log_file = os.path.join(log_dir, 'bookings.log')

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING if production_mode else logging.DEBUG)
    root_logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d in %(funcName)s()] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    main_file_handler = logging.handlers.RotatingFileHandler(
        main_log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    main_file_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    main_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(main_file_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        error_log_file,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=5,
        encoding='utf-8'
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_file_handler)

    bookings_handler = logging.handlers.RotatingFileHandler(
        bookings_log_file,
        maxBytes=20*1024*1024,  # 20MB
        backupCount=5,
        encoding='utf-8'
    )
    bookings_handler.setLevel(logging.INFO if production_mode else logging.DEBUG)
    bookings_handler.setFormatter(detailed_formatter)

    for name in BOOKING_LOGGERS:
        booking_logger = logging.getLogger(name)
        booking_logger.handlers = [bookings_handler]
        booking_logger.setLevel(logging.INFO if production_mode else logging.DEBUG)

    for name in BOT_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if production_mode else logging.DEBUG)

    # Reduce noise from external libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('telegram').setLevel(logging.INFO)

    root_logger.info("="*80)
    root_logger.info(f"Booking Bot Logging Initialized - {datetime.now()}")
    root_logger.info(f"Production Mode: {'ON' if production_mode else 'OFF'}")
    root_logger.info(f"Main log: {main_log_file}")
    root_logger.info(f"Error log: {error_log_file}")
    root_logger.info(f"Bookings log: {bookings_log_file}")
    root_logger.info("="*80)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name

    Args:
        name: Logger name, one of the component names used across the bot

    Returns:
        logging.Logger instance
    """
    return logging.getLogger(name)
