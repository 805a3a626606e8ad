"""
Core module for radkin.

This module provides the time-window kernel, the relativistic conversion and
the trace sampling engine.
"""

from .window import TemporalWindow
from .relativity import RelativisticConverter, lorentz_factor, velocity_ratio
from .trace import Trace
from .sampler import TraceSampler, KinematicStep, KinematicHistory

__all__ = [
    'TemporalWindow',
    'RelativisticConverter',
    'lorentz_factor',
    'velocity_ratio',
    'Trace',
    'TraceSampler',
    'KinematicStep',
    'KinematicHistory',
]
