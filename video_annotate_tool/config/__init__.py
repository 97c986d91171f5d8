"""
Configuration package for the video annotate tool.

Re-exports all configuration components.
"""

from .constants import (
    STORAGE_URI_PREFIX,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_ENABLE_AUTOMATIC_PUNCTUATION,
    DEFAULT_SETTINGS,
    LABEL_KINDS,
    positive_float,
)
from .settings import Config, load_settings, log_invalid_settings
from .logging import setup_logging, console

__all__ = [
    # Constants
    'STORAGE_URI_PREFIX',
    'DEFAULT_LANGUAGE_CODE',
    'DEFAULT_ENABLE_AUTOMATIC_PUNCTUATION',
    'DEFAULT_SETTINGS',
    'LABEL_KINDS',
    'positive_float',

    # Classes
    'Config',

    # Functions and objects
    'load_settings',
    'log_invalid_settings',
    'setup_logging',
    'console',
]
