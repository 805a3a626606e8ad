import pytest
import numpy as np
from radkin.core.window import TemporalWindow

@pytest.fixture
def unit_axis():
    """Time axis with uniform step h=1.0."""
    return TemporalWindow(0.0, 1.0, 2.0, 3.0)

def test_window_initialization(unit_axis):
    win = TemporalWindow(0.0, 1.0, 4.0, 9.0, time_axis=unit_axis)
    assert win.values == (0.0, 1.0, 4.0, 9.0)
    assert win.old2 == 0.0 and win.old == 1.0 and win.now == 4.0 and win.future == 9.0
    assert win.time_axis is unit_axis
    assert win.is_populated

def test_empty_window_is_not_populated(unit_axis):
    win = TemporalWindow.empty(unit_axis)
    assert win.time_axis is unit_axis
    assert win.values == (None, None, None, None)
    assert not win.is_populated

@pytest.mark.parametrize("values", [
    [0.5, -1.0, 2.0, 3.5, 7.0],
    [np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]), np.array([0.0, 0.0, 1.0]),
     np.array([1.0, 1.0, 0.0]), np.array([2.0, -3.0, 4.0])],
])
def test_advance_shifts_values(unit_axis, values):
    win = TemporalWindow(*values[:4], time_axis=unit_axis)
    win.advance(values[4])
    for got, expected in zip(win.values, values[1:]):
        np.testing.assert_array_equal(got, expected)

def test_advance_fills_empty_window(unit_axis):
    win = TemporalWindow.empty(unit_axis)
    for i, v in enumerate([10.0, 20.0, 30.0, 40.0]):
        assert not win.is_populated
        win.advance(v)
    assert win.is_populated
    assert win.values == (10.0, 20.0, 30.0, 40.0)

def test_derivatives_of_squares(unit_axis):
    win = TemporalWindow(0.0, 1.0, 4.0, 9.0, time_axis=unit_axis)
    assert win.derivative_at_prior_step() == pytest.approx(2.0)
    assert win.derivative_at_current_step() == pytest.approx(4.0)

@pytest.mark.parametrize("a, b, c, t0, h", [
    (0.0, 3.0, -1.0, 0.0, 1.0),
    (2.5, -1.0, 4.0, 0.7, 0.25),
    (-1.5e3, 2.0e2, 1.0, 1e-3, 1e-4),
])
def test_centered_derivative_exact_for_quadratics(a, b, c, t0, h):
    times = [t0 + i * h for i in range(4)]
    axis = TemporalWindow(*times)
    win = TemporalWindow(*[a * t**2 + b * t + c for t in times], time_axis=axis)
    assert win.derivative_at_prior_step() == pytest.approx(2 * a * times[1] + b, rel=1e-9, abs=1e-9)
    assert win.derivative_at_current_step() == pytest.approx(2 * a * times[2] + b, rel=1e-9, abs=1e-9)

def test_vector_derivative_nonuniform_axis():
    axis = TemporalWindow(0.0, 0.5, 2.0, 2.5)
    win = TemporalWindow(np.zeros(3), np.array([1.0, 0.0, 0.0]),
                         np.array([4.0, 2.0, 0.0]), np.array([5.0, 2.0, 1.0]), time_axis=axis)
    np.testing.assert_allclose(win.derivative_at_prior_step(), [2.0, 1.0, 0.0])
    np.testing.assert_allclose(win.derivative_at_current_step(), [2.0, 1.0, 0.5])

def test_derivatives_follow_shared_axis(unit_axis):
    win = TemporalWindow(0.0, 1.0, 4.0, 9.0, time_axis=unit_axis)
    unit_axis.advance(4.0)
    win.advance(16.0)
    assert win.derivative_at_prior_step() == pytest.approx(4.0)
    assert win.derivative_at_current_step() == pytest.approx(6.0)

def test_delta_from_old_to_now(unit_axis):
    win = TemporalWindow(0.0, 1.0, 4.0, 9.0, time_axis=unit_axis)
    assert win.delta_from_old_to_now() == 3.0
    assert unit_axis.delta_from_old_to_now() == 1.0

def test_assign_copies_values(unit_axis):
    src = TemporalWindow(1.0, 2.0, 3.0, 4.0, time_axis=unit_axis)
    dst = TemporalWindow.empty(unit_axis)
    assert dst.assign(src) is dst
    assert dst.values == (1.0, 2.0, 3.0, 4.0)
    src.advance(5.0)
    assert dst.values == (1.0, 2.0, 3.0, 4.0)

def test_assign_copies_arrays(unit_axis):
    src = TemporalWindow(*[np.full(3, float(i)) for i in range(4)], time_axis=unit_axis)
    dst = TemporalWindow.empty(unit_axis).assign(src)
    src.now[:] = 99.0
    np.testing.assert_array_equal(dst.now, np.full(3, 2.0))
    assert dst.now is not src.now

def test_assign_rejects_foreign_axis(unit_axis):
    other_axis = TemporalWindow(0.0, 1.0, 2.0, 3.0)
    src = TemporalWindow(1.0, 2.0, 3.0, 4.0, time_axis=other_axis)
    dst = TemporalWindow.empty(unit_axis)
    with pytest.raises(AssertionError):
        dst.assign(src)
