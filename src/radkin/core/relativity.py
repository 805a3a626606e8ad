"""
Relativistic momentum conversion.

Energy = sqrt(p^2 c^2 + m_0^2 c^4) = gamma m_0 c^2, and the velocity ratio
beta = v/c with v = p / (m_0 gamma). Single-sample conversions are plain
functions; :class:`RelativisticConverter` maps them over the four slots of a
momentum :class:`~radkin.core.window.TemporalWindow`.
"""
import numpy as np
from typing import Optional, Union

from .window import TemporalWindow
from ..utils.constants import SPEED_OF_LIGHT, ELECTRON_MASS
from ..utils.helpers import norm

Momentum = Union[float, np.ndarray]


def lorentz_factor(p: Momentum, speed_of_light: float = SPEED_OF_LIGHT,
                   rest_mass: float = ELECTRON_MASS) -> float:
    """
    Lorentz factor of a single momentum sample.

    gamma = sqrt((|p| c)^2 + (m c^2)^2) / (m c^2), evaluated as
    hypot(|p| / (m c), 1).

    Args:
        p: momentum vector (or scalar) in units consistent with the constants
        speed_of_light: c
        rest_mass: m_0

    Returns:
        gamma >= 1
    """
    return float(np.hypot(norm(p) / (rest_mass * speed_of_light), 1.0))


def velocity_ratio(p: Momentum, gamma: float, speed_of_light: float = SPEED_OF_LIGHT,
                   rest_mass: float = ELECTRON_MASS) -> Momentum:
    """
    Velocity ratio beta = p / (c m gamma) of a single momentum sample.

    ``gamma`` must be the Lorentz factor of the same sample.
    """
    return np.asarray(p, dtype=np.float64) * (1.0 / (speed_of_light * rest_mass * gamma))


class RelativisticConverter:
    """
    Converts momentum windows into gamma and beta windows.

    The converter is bound to the time axis of the windows it produces and
    carries the constants used by the conversion; it keeps no other state.
    """

    def __init__(self, time_axis: Optional[TemporalWindow[float]],
                 speed_of_light: float = SPEED_OF_LIGHT, rest_mass: float = ELECTRON_MASS):
        if not np.isfinite(speed_of_light) or speed_of_light <= 0:
            raise ValueError(f"speed_of_light must be positive and finite, got {speed_of_light}")
        if not np.isfinite(rest_mass) or rest_mass <= 0:
            raise ValueError(f"rest_mass must be positive and finite, got {rest_mass}")
        self.time_axis = time_axis
        self.speed_of_light = speed_of_light
        self.rest_mass = rest_mass

    def momentum_to_gamma(self, p: TemporalWindow[np.ndarray]) -> TemporalWindow[float]:
        """Gamma of each momentum slot, bound to the converter's time axis."""
        return TemporalWindow(self.gamma(p.old2),
                              self.gamma(p.old),
                              self.gamma(p.now),
                              self.gamma(p.future),
                              time_axis=self.time_axis)

    def momentum_to_beta(self, p: TemporalWindow[np.ndarray],
                         gamma: TemporalWindow[float]) -> TemporalWindow[np.ndarray]:
        """
        Beta of each momentum slot.

        Slot i of ``p`` is combined with slot i of ``gamma``, so ``gamma``
        must have been computed from ``p`` at the same step (for example by
        :meth:`momentum_to_gamma`).
        """
        assert gamma.time_axis is p.time_axis or gamma.time_axis is self.time_axis, \
            "momentum and gamma windows are bound to different time axes"
        return TemporalWindow(self.beta(p.old2, gamma.old2),
                              self.beta(p.old, gamma.old),
                              self.beta(p.now, gamma.now),
                              self.beta(p.future, gamma.future),
                              time_axis=self.time_axis)

    def gamma(self, p: Momentum) -> float:
        return lorentz_factor(p, self.speed_of_light, self.rest_mass)

    def beta(self, p: Momentum, gamma: float) -> Momentum:
        return velocity_ratio(p, gamma, self.speed_of_light, self.rest_mass)
