"""
Utilities module for radkin.

This module provides arithmetic primitives, physical constants and
configuration management for the radkin package.
"""

from .config_manager import ConfigManager
from .constants import SPEED_OF_LIGHT, ELECTRON_MASS, DEFAULT_CONFIG
from .helpers import (
    square,
    norm,
    update_dict_recursively
)

__all__ = [
    'ConfigManager',
    'SPEED_OF_LIGHT',
    'ELECTRON_MASS',
    'DEFAULT_CONFIG',
    'square',
    'norm',
    'update_dict_recursively'
]
