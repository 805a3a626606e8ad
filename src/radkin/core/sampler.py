"""
Kinematics sampling engine.

Drives the time-axis and momentum windows through a trace in lockstep and
emits gamma, beta and d(beta)/dt at every interior sample.
"""
from dataclasses import dataclass
import numpy as np
import logging
from typing import Iterator, List, Optional
from tqdm import tqdm

from .trace import Trace
from .window import TemporalWindow
from .relativity import RelativisticConverter
from ..utils.constants import SPEED_OF_LIGHT, ELECTRON_MASS
from ..utils.config_manager import ConfigManager

logger = logging.getLogger(__name__)

WINDOW_SIZE = 4

@dataclass
class KinematicStep:
    index: int          # sample index within the trace
    time: float
    dt: float           # time since the previous sample
    gamma: float
    beta: np.ndarray
    beta_dot: np.ndarray
    position: Optional[np.ndarray] = None

@dataclass
class KinematicHistory:
    indices: np.ndarray
    times: np.ndarray
    dt: np.ndarray
    gamma: np.ndarray
    beta: np.ndarray       # (n_steps, 3)
    beta_dot: np.ndarray   # (n_steps, 3)
    positions: Optional[np.ndarray] = None

    @property
    def n_steps(self) -> int:
        return len(self.indices)

class TraceSampler:
    def __init__(self, trace: Trace, speed_of_light: float = SPEED_OF_LIGHT,
                 rest_mass: float = ELECTRON_MASS):
        if trace.n_samples < WINDOW_SIZE:
            raise ValueError(f"Trace needs at least {WINDOW_SIZE} samples, got {trace.n_samples}.")
        self.trace = trace
        self.speed_of_light = speed_of_light
        self.rest_mass = rest_mass

    @classmethod
    def from_config(cls, trace: Trace, config: ConfigManager) -> 'TraceSampler':
        physics = config.get_physics_config()
        return cls(trace, speed_of_light=physics['speed_of_light'], rest_mass=physics['rest_mass'])

    def __len__(self) -> int:
        return self.trace.n_samples - 2

    def __iter__(self) -> Iterator[KinematicStep]:
        return self.steps()

    def steps(self) -> Iterator[KinematicStep]:
        """
        Yield one KinematicStep per interior sample (indices 1 .. n-2).

        The time axis is owned by this generator; every window built here is
        bound to it.
        """
        time_axis: TemporalWindow[float] = TemporalWindow.empty(None)
        momentum: TemporalWindow[np.ndarray] = TemporalWindow.empty(time_axis)
        converter = RelativisticConverter(time_axis, self.speed_of_light, self.rest_mass)

        logger.info(f"Sampling trace with {self.trace.n_samples} samples over {self.trace.duration:.3e} s.")
        for i in range(self.trace.n_samples):
            time_axis.advance(float(self.trace.times[i]))
            momentum.advance(self.trace.momenta[i])
            if i < WINDOW_SIZE - 1:
                continue

            gamma = converter.momentum_to_gamma(momentum)
            beta = converter.momentum_to_beta(momentum, gamma)

            if i == WINDOW_SIZE - 1:
                # first full window: the sample at "old" is only reachable now
                yield KinematicStep(index=i - 2,
                                    time=time_axis.old,
                                    dt=time_axis.old - time_axis.old2,
                                    gamma=gamma.old,
                                    beta=beta.old,
                                    beta_dot=beta.derivative_at_prior_step(),
                                    position=self._position(i - 2))
            yield KinematicStep(index=i - 1,
                                time=time_axis.now,
                                dt=time_axis.delta_from_old_to_now(),
                                gamma=gamma.now,
                                beta=beta.now,
                                beta_dot=beta.derivative_at_current_step(),
                                position=self._position(i - 1))

    def history(self, progress: bool = False) -> KinematicHistory:
        """Collect all steps of the trace into stacked arrays."""
        steps: List[KinematicStep] = list(tqdm(self.steps(), total=len(self), desc="Sampling trace",
                                               unit="step", disable=not progress))
        positions = None
        if self.trace.positions is not None:
            positions = np.vstack([s.position for s in steps])
        hist = KinematicHistory(indices=np.array([s.index for s in steps], dtype=int),
                                times=np.array([s.time for s in steps], dtype=np.float64),
                                dt=np.array([s.dt for s in steps], dtype=np.float64),
                                gamma=np.array([s.gamma for s in steps], dtype=np.float64),
                                beta=np.vstack([s.beta for s in steps]),
                                beta_dot=np.vstack([s.beta_dot for s in steps]),
                                positions=positions)
        logger.info(f"Sampled {hist.n_steps} steps, gamma range [{hist.gamma.min():.6g}, {hist.gamma.max():.6g}].")
        return hist

    def _position(self, index: int) -> Optional[np.ndarray]:
        if self.trace.positions is None:
            return None
        return self.trace.positions[index]
