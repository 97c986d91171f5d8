"""
Settings management for the video annotate tool.

Provides configuration handling backed by defaults, a .env file and
environment variables.
"""

import copy
import os
from typing import Dict, Any, List, Optional, Tuple

import structlog
from dotenv import load_dotenv

from .constants import DEFAULT_SETTINGS, ENV_SETTINGS

logger = structlog.get_logger(__name__)


class Config:
    """
    A simple configuration class to hold and provide settings.
    """
    def __init__(self, config_data: Dict[str, Any] = None):
        """
        Initialize the configuration.

        Args:
            config_data: Initial configuration data
        """
        self._config = config_data if config_data is not None else {}
        self.invalid_settings: List[Tuple[str, str]] = []

    def get_setting(self, key: str, default: Any = None) -> Any:
        """
        Retrieves a setting value by key.
        Uses dot notation for nested keys (e.g., 'transcription.language_code').

        Args:
            key: The key to retrieve
            default: Default value if key is not found

        Returns:
            The setting value or default
        """
        keys = key.split('.')
        value = self._config
        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set_setting(self, key: str, value: Any) -> None:
        """
        Sets a setting value by key.
        Uses dot notation for nested keys.
        """
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value

    def update_config(self, new_config_data: Dict[str, Any]) -> None:
        """
        Merges new configuration data into the existing configuration.

        Args:
            new_config_data: New configuration data to merge
        """
        def _deep_update(source: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
            for key, value in overrides.items():
                if isinstance(value, dict) and key in source and isinstance(source[key], dict):
                    _deep_update(source[key], value)
                else:
                    source[key] = value
            return source
        self._config = _deep_update(self._config, new_config_data)

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def __repr__(self) -> str:
        return f"Config(config_data={self._config})"


def _env_overrides(environ: Dict[str, str], invalid: List[Tuple[str, str]]) -> Config:
    overrides = Config()
    for env_name, (key, cast) in ENV_SETTINGS.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            overrides.set_setting(key, cast(raw))
        except ValueError:
            invalid.append((env_name, raw))
    return overrides


def load_settings(environ: Optional[Dict[str, str]] = None, dotenv: bool = True) -> Config:
    """
    Build the effective configuration.

    Defaults from ``DEFAULT_SETTINGS`` are overlaid with ``VIDEO_ANNOTATE_*``
    environment variables. Values that fail to parse are skipped and kept on
    ``config.invalid_settings``. A ``.env`` file in the working directory is loaded
    first unless ``dotenv`` is False.

    Args:
        environ: Mapping to read variables from (defaults to ``os.environ``)
        dotenv: Whether to load a .env file before reading the environment

    Returns:
        Config: The merged configuration
    """
    if dotenv:
        load_dotenv()
    if environ is None:
        environ = dict(os.environ)

    invalid: List[Tuple[str, str]] = []
    config = Config(copy.deepcopy(DEFAULT_SETTINGS))
    config.update_config(_env_overrides(environ, invalid).as_dict())
    config.invalid_settings = invalid
    return config


def log_invalid_settings(config: Config) -> None:
    """Warn about environment values load_settings had to ignore.

    Call this once logging is configured so the warnings reach stderr.
    """
    for env_name, raw in config.invalid_settings:
        logger.warning("Ignoring invalid environment setting", variable=env_name, value=raw)
