"""
Four-sample rolling time window with centered finite-difference derivatives.

A window holds one quantity at the four consecutive timesteps t-3, t-2, t-1
and t (``old2``, ``old``, ``now``, ``future``). Derivatives are taken against
a separate ``TemporalWindow[float]`` holding the absolute times of the same
four steps. That time axis is shared by reference between all windows built
on it and is owned by whoever drives the sampling.
"""
import copy
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar('T')  # float or np.ndarray: needs subtraction and division by a float


class TemporalWindow(Generic[T]):
    """
    Storage for four consecutive samples of a quantity.

    Derivatives are only defined once all four slots hold a value, either
    from the populating constructor or after four calls to :meth:`advance`.
    This is not checked.
    """

    def __init__(self, old2: Optional[T] = None, old: Optional[T] = None,
                 now: Optional[T] = None, future: Optional[T] = None,
                 time_axis: Optional['TemporalWindow[float]'] = None):
        """
        Args:
            old2: value at time t-3
            old: value at time t-2
            now: value at time t-1
            future: value at time t
            time_axis: window of absolute times for the same four steps
        """
        self._old2 = old2
        self._old = old
        self._now = now
        self._future = future
        self._time_axis = time_axis

    @classmethod
    def empty(cls, time_axis: Optional['TemporalWindow[float]']) -> 'TemporalWindow[T]':
        """Window bound to ``time_axis`` with no values yet."""
        return cls(time_axis=time_axis)

    @property
    def time_axis(self) -> Optional['TemporalWindow[float]']:
        return self._time_axis

    def assign(self, other: 'TemporalWindow[T]') -> 'TemporalWindow[T]':
        """
        Copy the four values of ``other`` into this window.

        Both windows must be bound to the same time axis object. Array values
        are copied, so later in-place edits of ``other`` do not show up here.
        """
        assert other._time_axis is self._time_axis, "windows are bound to different time axes"
        self._old2 = copy.copy(other._old2)
        self._old = copy.copy(other._old)
        self._now = copy.copy(other._now)
        self._future = copy.copy(other._future)
        return self

    def advance(self, next_value: T) -> None:
        """Shift values down one step (now -> old, ...) and store ``next_value`` as future."""
        self._old2 = self._old
        self._old = self._now
        self._now = self._future
        self._future = next_value

    def derivative_at_prior_step(self) -> T:
        """Derivative at t-2 (``old``)."""
        # second order symmetric time derivative
        return (self._now - self._old2) / (self._time_axis.now - self._time_axis.old2)

    def derivative_at_current_step(self) -> T:
        """Derivative at t-1 (``now``)."""
        # second order symmetric time derivative
        return (self._future - self._old) / (self._time_axis.future - self._time_axis.old)

    @property
    def old2(self) -> T:
        """Value at t-3."""
        return self._old2

    @property
    def old(self) -> T:
        """Value at t-2."""
        return self._old

    @property
    def now(self) -> T:
        """Value at t-1."""
        return self._now

    @property
    def future(self) -> T:
        """Value at t."""
        return self._future

    @property
    def values(self) -> Tuple[T, T, T, T]:
        return (self._old2, self._old, self._now, self._future)

    @property
    def is_populated(self) -> bool:
        return all(v is not None for v in self.values)

    def delta_from_old_to_now(self) -> T:
        """First order difference ``now - old``."""
        return self._now - self._old

    def __repr__(self) -> str:
        return (f"TemporalWindow(old2={self._old2!r}, old={self._old!r}, "
                f"now={self._now!r}, future={self._future!r})")
