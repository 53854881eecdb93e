import numpy as np
import pytest

from stacking_arm.utils.easing import arc_offset, ease_in_out, lerp


def test_ease_boundary_values():
    assert ease_in_out(0.0) == 0.0
    assert ease_in_out(1.0) == pytest.approx(1.0)
    assert ease_in_out(0.5) == pytest.approx(0.5)


def test_ease_is_monotonic_on_unit_interval():
    values = [ease_in_out(t) for t in np.linspace(0.0, 1.0, 101)]
    assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))


def test_ease_is_symmetric():
    for t in (0.1, 0.25, 0.4):
        assert ease_in_out(t) + ease_in_out(1.0 - t) == pytest.approx(1.0)


def test_arc_offset_boundary_values():
    assert arc_offset(0.0) == 0.0
    assert arc_offset(1.0) == 0.0
    assert arc_offset(0.5) == pytest.approx(0.5)


def test_arc_offset_scales_with_height():
    assert arc_offset(0.5, height=2.0) == pytest.approx(2.0)
    assert arc_offset(0.25, height=1.0) == pytest.approx(0.75)


def test_lerp():
    start = np.array([0.0, 0.0, 0.0])
    end = np.array([2.0, 4.0, -2.0])
    assert np.allclose(lerp(start, end, 0.5), [1.0, 2.0, -1.0])
    assert np.allclose(lerp(start, end, 0.0), start)
    assert np.allclose(lerp(start, end, 1.0), end)
