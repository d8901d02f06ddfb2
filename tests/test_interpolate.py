import math
import numpy as np
import pytest

from huepath.types.color_types import HueMode
from huepath.types.format_type import TAU
from huepath.utils.interpolate import (
    linear,
    angular,
    np_linear,
    np_angular,
    resolve_hue_mode,
)


def _in_short_arc(theta, low_deg=350.0, high_deg=10.0):
    deg = math.degrees(theta)
    return deg >= low_deg - 1e-9 or deg <= high_deg + 1e-9


def test_linear():
    assert linear(0, 10, 5, 10) == 5
    assert linear(2.0, 4.0, 0, 4) == 2.0
    assert linear(2.0, 4.0, 1, 4) == 2.5

def test_linear_endpoint_is_exact():
    assert linear(0.1, 0.7, 3, 3) == 0.7
    assert linear(38.46153846153846, 100.0, 7, 7) == 100.0

def test_linear_degenerate_steps():
    assert linear(1.0, 9.0, 0, 0) == 9.0
    assert linear(1.0, 9.0, 2, -3) == 9.0

def test_angular_same_angle():
    for theta in (0.0, 1.0, 3.0, 6.0):
        for n in range(11):
            assert angular(theta, theta, n, 10) == theta

def test_angular_takes_shortest_arc():
    start = math.radians(350)
    end = math.radians(10)
    steps = 10

    assert _in_short_arc(angular(start, end, steps // 2, steps))
    for n in range(steps + 1):
        assert _in_short_arc(angular(start, end, n, steps))
        assert _in_short_arc(angular(end, start, n, steps))

def test_angular_midpoint_of_wrap_is_zero():
    theta = angular(math.radians(350), math.radians(10), 1, 2)
    assert min(theta, TAU - theta) == pytest.approx(0.0, abs=1e-9)

def test_angular_range():
    for start_deg in range(0, 360, 45):
        for end_deg in range(0, 360, 40):
            for n in range(6):
                theta = angular(math.radians(start_deg), math.radians(end_deg), n, 5)
                assert 0.0 <= theta < TAU

def test_angular_endpoints():
    start = math.radians(200)
    end = math.radians(30)
    assert angular(start, end, 0, 4) == start
    assert angular(start, end, 4, 4) == end

def test_angular_degenerate_steps():
    assert angular(1.0, 2.0, 0, 0) == 2.0
    assert angular(1.0, 2.0, 1, -1) == 2.0

def test_angular_normalizes_inputs():
    assert angular(TAU + 1.0, 1.0, 1, 2) == pytest.approx(1.0)
    assert angular(-math.pi / 2, 0.0, 0, 2) == pytest.approx(3 * math.pi / 2)

def test_angular_modes():
    quarter = math.pi / 2
    assert angular(0.0, quarter, 1, 2, HueMode.CW) == pytest.approx(math.pi / 4)
    assert angular(0.0, quarter, 1, 2, HueMode.CCW) == pytest.approx(5 * math.pi / 4)
    assert angular(0.0, quarter, 1, 2, "longest") == pytest.approx(5 * math.pi / 4)

    longest = angular(math.radians(350), math.radians(10), 1, 2, HueMode.LONGEST)
    assert longest == pytest.approx(math.pi)

def test_resolve_hue_mode():
    assert resolve_hue_mode(None) is HueMode.SHORTEST
    assert resolve_hue_mode("shortest") is HueMode.SHORTEST
    assert resolve_hue_mode("clockwise") is HueMode.CW
    assert resolve_hue_mode("ccw") is HueMode.CCW
    assert resolve_hue_mode(HueMode.LONGEST) is HueMode.LONGEST

def test_resolve_hue_mode_invalid():
    with pytest.raises(ValueError, match="Invalid hue direction"):
        resolve_hue_mode("sideways")

def test_np_linear_matches_scalar():
    n = np.arange(8)
    expected = [linear(12.5, 80.0, i, 7) for i in range(8)]
    assert np.array_equal(np_linear(12.5, 80.0, n, 7), expected)
    assert np.array_equal(np_linear(1.0, 5.0, np.arange(3), 0), [5.0, 5.0, 5.0])

def test_np_angular_matches_scalar():
    n = np.arange(11)
    for start_deg, end_deg in ((350, 10), (10, 350), (0, 240), (90, 90)):
        start, end = math.radians(start_deg), math.radians(end_deg)
        for mode in HueMode:
            expected = [angular(start, end, i, 10, mode) for i in range(11)]
            assert np.array_equal(np_angular(start, end, n, 10, mode), expected)
