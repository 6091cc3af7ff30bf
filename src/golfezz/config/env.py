"""Environment variable handling for configuration."""

import os
from typing import Any

from golfezz.config.types import ApiConfig
from golfezz.config.types import GlobalConfig
from golfezz.config.types import LoggingConfig


DEFAULT_API_URL = 'http://localhost:8080/api/v1'
DEFAULT_TIMEOUT = '10'

class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'GOLFEZZ_API_URL': ('api', 'url'),
        'GOLFEZZ_TIMEOUT': ('api', 'timeout'),
        'GOLFEZZ_SESSION_FILE': ('session', 'file'),
        'GOLFEZZ_LOG_LEVEL': ('logging', 'default_level'),
        'GOLFEZZ_LOG_FILE': ('logging', 'file'),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def _set_nested_value(config: dict[str, Any], path: tuple, value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[path[-1]] = value

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Update configuration dictionary with environment variables.
        
        Args:
            config: Configuration dictionary to update
        """
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls._set_nested_value(config, path, value)

    @classmethod
    def get_api_config(cls) -> ApiConfig:
        """Get backend API configuration from environment."""
        return {
            'url': cls.get_env_value('GOLFEZZ_API_URL', DEFAULT_API_URL),
            'timeout': cls.get_env_value('GOLFEZZ_TIMEOUT', DEFAULT_TIMEOUT)
        }

    @classmethod
    def get_logging_config(cls) -> LoggingConfig:
        """Get logging configuration from environment."""
        return {
            'default_level': cls.get_env_value('GOLFEZZ_LOG_LEVEL', 'WARNING'),
            'verbose_level': cls.get_env_value('GOLFEZZ_VERBOSE_LOG_LEVEL', 'DEBUG'),
            'file': cls.get_env_value('GOLFEZZ_LOG_FILE'),
            'max_size': int(cls.get_env_value('GOLFEZZ_LOG_MAX_SIZE', '10')),
            'backup_count': int(cls.get_env_value('GOLFEZZ_LOG_BACKUP_COUNT', '5'))
        }

    @classmethod
    def get_global_config(cls) -> GlobalConfig:
        """Get global configuration from environment."""
        return {
            'api': cls.get_api_config(),
            'session': {
                'file': cls.get_env_value('GOLFEZZ_SESSION_FILE')
            },
            'logging': cls.get_logging_config(),
            'errors': {
                'enabled': True,
                'error_threshold': 5,
                'time_threshold': 300
            }
        }
