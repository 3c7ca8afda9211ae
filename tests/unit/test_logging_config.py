import logging
from contextlib import contextmanager

import logging_config


@contextmanager
def _isolated_logging():
    names = ('',) + logging_config.BOOKING_LOGGERS + logging_config.BOT_LOGGERS
    saved = {name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level) for name in names}
    try:
        yield
    finally:
        for name, (handlers, level) in saved.items():
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                if handler not in handlers:
                    handler.close()
            logger.handlers = handlers
            logger.setLevel(level)


def test_setup_logging_writes_booking_records_to_their_own_file(tmp_path):
    with _isolated_logging():
        logging_config.setup_logging(production_mode=False, log_dir=str(tmp_path))

        logging.getLogger('BookingStore').info('Added booking abc')
        for handler in logging.getLogger('BookingStore').handlers:
            handler.flush()

        assert {path.name for path in tmp_path.iterdir()} >= {'bot.log', 'bot_errors.log', 'bookings.log'}
        assert 'Added booking abc' in (tmp_path / 'bookings.log').read_text(encoding='utf-8')


def test_production_mode_quiets_root(tmp_path):
    with _isolated_logging():
        logging_config.setup_logging(production_mode=True, log_dir=str(tmp_path))

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger('BookingLifecycle').level == logging.INFO
