"""
Core trace data structure for a single particle trajectory.
"""
from dataclasses import dataclass
import numpy as np
from typing import Optional

@dataclass
class Trace:
    times: np.ndarray
    momenta: np.ndarray
    positions: Optional[np.ndarray] = None

    def __post_init__(self):
        self.times = np.asarray(self.times, dtype=np.float64)
        self.momenta = np.asarray(self.momenta, dtype=np.float64)
        if self.times.ndim != 1:
            raise ValueError("Times must be 1D")
        if self.momenta.ndim != 2 or self.momenta.shape[1] != 3:
            raise ValueError(f"Momenta must be 2D (samples, xyz) with last dimension 3, got {self.momenta.shape}")
        if self.momenta.shape[0] != len(self.times):
            raise ValueError(f"Sample count mismatch: {len(self.times)} times, {self.momenta.shape[0]} momenta.")
        if self.positions is not None:
            self.positions = np.asarray(self.positions, dtype=np.float64)
            if self.positions.shape != self.momenta.shape:
                raise ValueError(f"Positions must have shape {self.momenta.shape}, got {self.positions.shape}")
        if not np.all(np.isfinite(self.times)) or not np.all(np.isfinite(self.momenta)):
            raise ValueError("Times and momenta must be finite.")
        if len(self.times) > 1 and np.any(np.diff(self.times) <= 0):
            raise ValueError("Times must be strictly increasing.")

    @property
    def n_samples(self) -> int:
        return len(self.times)

    @property
    def duration(self) -> float:
        if self.n_samples == 0:
            return 0.0
        return float(self.times[-1] - self.times[0])
