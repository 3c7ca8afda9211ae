import os

from botapp.config import load_bot_config
from infrastructure.settings import load_settings


def test_defaults_when_environment_is_empty():
    settings = load_settings({})

    assert settings.bot_token == ''
    assert settings.production_mode is False
    assert settings.timezone == 'Asia/Seoul'
    assert settings.storage_file == os.path.join('data', 'storage.json')


def test_environment_overrides():
    settings = load_settings({
        'TELEGRAM_BOT_TOKEN': 'token',
        'PRODUCTION_MODE': 'Yes',
        'BOT_TIMEZONE': 'UTC',
        'DATA_DIRECTORY': 'state',
    })

    assert settings.bot_token == 'token'
    assert settings.production_mode is True
    assert settings.timezone == 'UTC'
    assert settings.storage_file == os.path.join('state', 'storage.json')


def test_bot_config_groups_settings():
    settings = load_settings({'TELEGRAM_BOT_TOKEN': 'abc', 'STORAGE_FILE': '/tmp/bookings.json'})

    config = load_bot_config(settings)

    assert config.telegram.token == 'abc'
    assert config.paths.storage_file == '/tmp/bookings.json'
    assert config.timezone == 'Asia/Seoul'
