"""Configuration settings for the GolfEzz client."""

import os
from pathlib import Path
from typing import Any

import yaml

from golfezz.config.env import EnvConfig
from golfezz.config.types import AppConfig
from golfezz.config.types import GlobalConfig
from golfezz.config.utils import deep_merge
from golfezz.config.utils import parse_timeout
from golfezz.config.utils import resolve_path
from golfezz.config.utils import validate_api_url
from golfezz.exceptions import ConfigError
from golfezz.error_codes import ErrorCode


DEFAULT_CONFIG_DIR = "~/.config/golfezz"

class ConfigurationManager:
    """Centralized configuration management with caching."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
            
        self._config: AppConfig | None = None
        self._config_path: Path | None = None
        self._initialized = True
    
    @property
    def config(self) -> AppConfig:
        """Get the current configuration, loading it if necessary."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config() first.")
        return self._config
    
    def load_config(
        self,
        config_dir: str | None = None,
        overrides: dict[str, Any] | None = None
    ) -> AppConfig:
        """Load configuration with caching.
        
        Args:
            config_dir: Directory holding config.yaml
            overrides: Values that take precedence over file and environment,
                in the same nested shape as config.yaml
        """
        if self._config is not None:
            return self._config
            
        self._config_path = _get_config_path(config_dir)
        global_config = _load_global_config(self._config_path)
        if overrides:
            global_config = deep_merge(global_config, overrides)
        
        try:
            api_url = str(global_config['api']['url']).rstrip('/')
            validate_api_url(api_url)
            timeout = parse_timeout(global_config['api']['timeout'])
        except ValueError as e:
            raise ConfigError(str(e), details={'config_dir': str(self._config_path)})
        
        session_file = global_config['session'].get('file') or 'session.json'
        logging_config = global_config['logging']
        
        self._config = AppConfig(
            global_config=global_config,
            api_url=api_url,
            timeout=timeout,
            session_file=str(resolve_path(session_file, self._config_path)),
            config_dir=str(self._config_path),
            log_level=logging_config.get('default_level', 'WARNING'),
            log_file=logging_config.get('file')
        )
        
        return self._config
    
    def reload_config(self) -> AppConfig:
        """Force reload configuration."""
        self._config = None
        return self.load_config(str(self._config_path) if self._config_path else None)
    
    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance."""
        cls._instance = None

def _get_config_path(config_dir: str | None = None) -> Path:
    """Get configuration directory path."""
    return resolve_path(
        config_dir or os.getenv("GOLFEZZ_CONFIG_DIR", DEFAULT_CONFIG_DIR)
    )

def _load_global_config(config_path: Path) -> GlobalConfig:
    """Load global configuration from YAML file and environment."""
    global_config = EnvConfig.get_global_config()
    
    config_file = config_path / "config.yaml"
    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {config_file}: {e}", code=ErrorCode.CONFIG_UNREADABLE)
        if not isinstance(loaded_config, dict):
            raise ConfigError(f"Invalid configuration in {config_file}: expected a mapping", code=ErrorCode.CONFIG_UNREADABLE)
        global_config = deep_merge(global_config, loaded_config)
        # Environment variables take precedence over the file
        EnvConfig.update_config_from_env(global_config)
    
    return global_config

def load_config(config_dir: str | None = None, overrides: dict[str, Any] | None = None) -> AppConfig:
    """Load configuration using the ConfigurationManager."""
    config_manager = ConfigurationManager()
    return config_manager.load_config(config_dir, overrides)
