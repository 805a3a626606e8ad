"""
Radiation Kinematics (radkin) Package
"""

__version__ = "0.1.0"

# Core components
from .core.window import TemporalWindow
from .core.relativity import RelativisticConverter, lorentz_factor, velocity_ratio
from .core.trace import Trace
from .core.sampler import TraceSampler, KinematicStep, KinematicHistory

# Utility components
from .utils.helpers import square, norm, update_dict_recursively
from .utils.constants import SPEED_OF_LIGHT, ELECTRON_MASS, DEFAULT_CONFIG
from .utils.config_manager import ConfigManager

__all__ = [
    # Core
    'TemporalWindow',
    'RelativisticConverter',
    'lorentz_factor',
    'velocity_ratio',
    'Trace',
    'TraceSampler',
    'KinematicStep',
    'KinematicHistory',
    # Utils
    'square',
    'norm',
    'update_dict_recursively',
    'SPEED_OF_LIGHT',
    'ELECTRON_MASS',
    'DEFAULT_CONFIG',
    'ConfigManager',
]
