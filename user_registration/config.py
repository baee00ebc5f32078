"""
Registration Library Configuration

Environment-specific configuration classes for development, testing and
production. Values come from environment variables, optionally loaded from a
``.env`` file through python-dotenv.

The configuration covers:
- Where accepted user records are persisted (local JSON store or remote API)
- The collection key the user list is stored under
- Remote collection endpoint and request timeout
- Logging level and output format
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Base configuration class containing common settings for all environments.
    """

    # Persistence
    PERSISTENCE_BACKEND = os.environ.get('PERSISTENCE_BACKEND', 'local')  # local | remote
    STORAGE_PATH = os.environ.get('STORAGE_PATH') or \
        str(Path.home() / '.user_registration' / 'local_storage.json')
    USERS_COLLECTION_KEY = os.environ.get('USERS_COLLECTION_KEY', 'registeredUsers')

    # Remote collection endpoint
    API_BASE_URL = os.environ.get('API_BASE_URL', 'https://jsonplaceholder.typicode.com')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', '10'))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_JSON = _env_bool('LOG_JSON', 'true')

    TESTING = False
    DEBUG = False

    @classmethod
    def uses_remote_backend(cls) -> bool:
        return cls.PERSISTENCE_BACKEND == 'remote'


class DevelopmentConfig(Config):
    """Development configuration: console logs, debug level."""

    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    LOG_JSON = _env_bool('LOG_JSON', 'false')


class TestingConfig(Config):
    """
    Testing configuration: throwaway storage location, no remote backend,
    reduced log noise.
    """

    TESTING = True
    PERSISTENCE_BACKEND = 'local'
    STORAGE_PATH = os.environ.get('TEST_STORAGE_PATH') or \
        str(Path(os.environ.get('TMPDIR', '/tmp')) / 'user_registration_test_storage.json')
    LOG_LEVEL = 'WARNING'


class ProductionConfig(Config):
    """Production configuration: JSON logs at INFO."""

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_JSON = True


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}


def get_config(config_name: Optional[str] = None) -> type:
    """
    Get configuration class based on environment name.

    Args:
        config_name: Name of the configuration environment. Defaults to the
            ``REGISTRATION_CONFIG`` environment variable.

    Returns:
        Configuration class for the specified environment
    """
    if config_name is None:
        config_name = os.environ.get('REGISTRATION_CONFIG', 'default')

    return config.get(config_name, DevelopmentConfig)
