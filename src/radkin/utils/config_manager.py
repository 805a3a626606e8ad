"""
Configuration management module for radkin.

This module provides functionality for loading, validating, and managing
the physical constants and run settings of a radiation-spectrum run.
"""
import copy
import math
import yaml
from pathlib import Path
import logging
from typing import Dict, Any, Optional, Union
import json

from .constants import DEFAULT_CONFIG
from .helpers import update_dict_recursively

logger = logging.getLogger(__name__)

def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0

def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

class ConfigManager:
    """Class for managing radkin configuration settings."""

    PHYSICS_KEYS = ['speed_of_light', 'rest_mass']
    SPECTRUM_KEYS = ['omega_max', 'theta_max', 'n_spectrum', 'n_theta', 'n_phi',
                     'n_trace', 'fft_length_factor', 'index_files_first', 'index_files_last']
    COUNT_KEYS = ['n_spectrum', 'n_theta', 'n_phi', 'n_trace', 'fft_length_factor']

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager with default settings.

        Args:
            config_file: Path to a YAML file overriding the defaults (optional)
        """
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        if config_file is not None:
            self.load_config(config_file)

    def load_config(self, config_file: Union[str, Path]) -> None:
        """
        Load configuration from a YAML file and merge it over the current settings.

        Args:
            config_file: Path to the configuration file
        """
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        logger.info(f"Loading configuration from {config_path}")
        with open(config_path, 'r') as f:
            user_cfg = yaml.safe_load(f)

        if user_cfg is None:
            logger.warning(f"Configuration file {config_path.name} is empty; keeping current settings.")
        elif not isinstance(user_cfg, dict):
            raise ValueError(f"Configuration file must contain a mapping, got {type(user_cfg).__name__}")
        else:
            self.config = self._merged(user_cfg)

    def _merged(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Merge updates over a copy of the current settings and validate the result."""
        candidate = copy.deepcopy(self.config)
        update_dict_recursively(candidate, copy.deepcopy(updates))
        self._validate_config(candidate)
        return candidate

    def _validate_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Validate a configuration dictionary (the current one by default)."""
        if config is None:
            config = self.config
        for key in ['physics', 'spectrum']:
            if not isinstance(config.get(key), dict):
                raise ValueError(f"Missing required configuration key: {key}")

        physics = config['physics']
        for key in self.PHYSICS_KEYS:
            if key not in physics:
                raise ValueError(f"Missing required physics setting: {key}")
            if not _is_positive_number(physics[key]):
                raise ValueError(f"Physics setting '{key}' must be a positive number, got {physics[key]!r}")

        spectrum = config['spectrum']
        for key in self.SPECTRUM_KEYS:
            if key not in spectrum:
                raise ValueError(f"Missing required spectrum setting: {key}")

        for key in ['omega_max', 'theta_max']:
            if not _is_positive_number(spectrum[key]):
                raise ValueError(f"Spectrum setting '{key}' must be a positive number, got {spectrum[key]!r}")
        for key in self.COUNT_KEYS:
            if not _is_integer(spectrum[key]) or spectrum[key] < 1:
                raise ValueError(f"Spectrum setting '{key}' must be a positive integer, got {spectrum[key]!r}")

        first, last = spectrum['index_files_first'], spectrum['index_files_last']
        if not _is_integer(first) or not _is_integer(last) or first < 0:
            raise ValueError(f"Trace index range must be non-negative integers, got ({first!r}, {last!r})")
        if first > last:
            raise ValueError(f"index_files_first ({first}) must not exceed index_files_last ({last})")
        if last > spectrum['n_trace']:
            logger.warning(f"index_files_last ({last}) exceeds n_trace ({spectrum['n_trace']}).")

    def get_physics_config(self) -> Dict[str, Any]:
        """
        Get physical constants.

        Returns:
            Dictionary with 'speed_of_light' and 'rest_mass'
        """
        return self.config.get('physics', {})

    def get_spectrum_config(self) -> Dict[str, Any]:
        """
        Get spectrum run settings.

        Returns:
            Dictionary of frequency/angle grid and trace settings
        """
        return self.config.get('spectrum', {})

    @property
    def trace_indices(self) -> range:
        """Indices of the trace files a run processes."""
        spectrum = self.get_spectrum_config()
        return range(spectrum['index_files_first'], spectrum['index_files_last'])

    def update_config(self, updates: Dict[str, Any]) -> None:
        """
        Update configuration settings.

        Args:
            updates: Dictionary of configuration updates
        """
        self.config = self._merged(updates)

    def save_config(self, output_file: Union[str, Path]) -> None:
        """
        Save current configuration to a file.

        Args:
            output_file: Path to save the configuration to
        """
        output_path = Path(output_file)
        logger.info(f"Saving configuration to {output_path}")

        with open(output_path, 'w') as f:
            yaml.dump(self.config, f, default_flow_style=False)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the current configuration as a dictionary.

        Returns:
            Deep copy of the current configuration
        """
        return copy.deepcopy(self.config)

    def to_json(self) -> str:
        """
        Get the current configuration as a JSON string.

        Returns:
            JSON string representation of configuration
        """
        return json.dumps(self.config, indent=4)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ConfigManager':
        """
        Create a ConfigManager from a (possibly partial) dictionary of settings.

        Args:
            config_dict: Dictionary of configuration settings merged over the defaults

        Returns:
            ConfigManager instance
        """
        instance = cls()
        instance.config = instance._merged(config_dict)
        return instance
