"""
Configuration for EventNest

OOP Concept: INHERITANCE
- Config holds the shared defaults
- Development/Testing/Production override what differs

Values that vary per machine come from the environment (a .env file is
loaded through python-dotenv).
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration shared by every environment."""

    LOG_LEVEL = os.environ.get('EVENTNEST_LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

    # Events are filed under their start date in this zone
    TIMEZONE = os.environ.get('EVENTNEST_TIMEZONE', 'UTC')

    SEED_DEMO_DATA = _env_flag('EVENTNEST_SEED_DEMO_DATA', True)

    MAX_TITLE_LENGTH = 50

    HASHMAP_INITIAL_CAPACITY = 16
    HASHMAP_LOAD_FACTOR = 0.75


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('EVENTNEST_LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SEED_DEMO_DATA = False
    TIMEZONE = 'UTC'
    LOG_LEVEL = 'WARNING'


class ProductionConfig(Config):
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}


def get_config(config_name=None):
    """
    Look up a configuration class by name.

    Args:
        config_name (str): 'development', 'testing', 'production' or 'default'.
            Falls back to EVENTNEST_ENV, then to 'default'.

    Returns:
        type: Configuration class
    """
    if config_name is None:
        config_name = os.environ.get('EVENTNEST_ENV', 'default')
    return config.get(config_name, config['default'])
