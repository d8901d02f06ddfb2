"""
Scalar and angular interpolation between two endpoints.

Both interpolators take a step index ``n`` and an interval count ``steps``
(``output_count - 1``). A non-positive ``steps`` is a degenerate single-point
request and yields the ``to`` endpoint; ``n == steps`` yields it exactly.
"""

import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HueMode, HueModeLike
from ..types.format_type import TAU


def resolve_hue_mode(direction: HueModeLike) -> HueMode:
    """Convert a string direction (or None) to a HueMode."""
    if direction is None or direction == 'shortest' or direction == HueMode.SHORTEST:
        return HueMode.SHORTEST
    elif direction == 'cw' or direction == 'clockwise' or direction == HueMode.CW:
        return HueMode.CW
    elif direction == 'ccw' or direction == 'counterclockwise' or direction == HueMode.CCW:
        return HueMode.CCW
    elif direction == 'longest' or direction == HueMode.LONGEST:
        return HueMode.LONGEST
    else:
        raise ValueError(f"Invalid hue direction: {direction}")


def linear(a: float, b: float, n: float, steps: int) -> float:
    """Value at step ``n`` of ``steps`` on the straight path from ``a`` to ``b``."""
    if steps <= 0 or n == steps:
        return b
    return a + n * (b - a) / steps


def _arc(from_theta: float, to_theta: float, mode: HueMode) -> float:
    """Signed angular distance to travel from ``from_theta`` to ``to_theta``."""
    diff = to_theta - from_theta
    if mode == HueMode.SHORTEST:
        if diff > math.pi:
            diff -= TAU
        elif diff < -math.pi:
            diff += TAU
    elif mode == HueMode.LONGEST:
        if 0 < diff <= math.pi:
            diff -= TAU
        elif -math.pi <= diff < 0:
            diff += TAU
    elif mode == HueMode.CW:
        if diff < 0:
            diff += TAU
    elif mode == HueMode.CCW:
        if diff > 0:
            diff -= TAU
    return diff


def _wrap_once(theta: float) -> float:
    if theta < 0:
        theta += TAU
    # A tiny negative angle can round up to exactly TAU above
    if theta >= TAU:
        theta -= TAU
    return theta


def angular(
    from_theta: float,
    to_theta: float,
    n: float,
    steps: int,
    mode: HueModeLike = HueMode.SHORTEST,
) -> float:
    """
    Angle at step ``n`` of ``steps`` between two angles on the circle.

    Angles are in radians. With the default mode the path is the shorter of
    the two arcs, so 350° -> 10° passes through 0° rather than 180°.

    Args:
        from_theta: Start angle
        to_theta: End angle
        n: Current step
        steps: Number of intervals
        mode: HueMode or direction string ('shortest', 'longest', 'cw', 'ccw')

    Returns:
        Angle in [0, 2π), or ``to_theta`` unchanged when ``steps <= 0``
    """
    if steps <= 0:
        return to_theta

    mode = resolve_hue_mode(mode)
    from_theta = _wrap_once(from_theta % TAU)
    to_theta = _wrap_once(to_theta % TAU)
    if n == steps:
        return to_theta

    diff = _arc(from_theta, to_theta, mode)
    return _wrap_once(from_theta + n * diff / steps)


# ===================== Vectorized =====================

def np_linear(a: float, b: float, n: NDArray, steps: int) -> NDArray:
    """Vectorized :func:`linear` over an array of step indices."""
    n = np.asarray(n, dtype=float)
    if steps <= 0:
        return np.full(n.shape, b, dtype=float)
    return np.where(n == steps, b, a + n * (b - a) / steps)


def np_angular(
    from_theta: float,
    to_theta: float,
    n: NDArray,
    steps: int,
    mode: HueModeLike = HueMode.SHORTEST,
) -> NDArray:
    """Vectorized :func:`angular` over an array of step indices."""
    n = np.asarray(n, dtype=float)
    if steps <= 0:
        return np.full(n.shape, to_theta, dtype=float)

    mode = resolve_hue_mode(mode)
    from_theta = _wrap_once(from_theta % TAU)
    to_theta = _wrap_once(to_theta % TAU)
    diff = _arc(from_theta, to_theta, mode)

    theta = from_theta + n * diff / steps
    theta = np.where(theta < 0, theta + TAU, theta)
    theta = np.where(theta >= TAU, theta - TAU, theta)
    return np.where(n == steps, to_theta, theta)
