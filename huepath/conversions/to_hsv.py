import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..exceptions import InvalidRange
from ..types.format_type import RGB_MAX, PERCENT_MAX


def _check_channel(name: str, value: float) -> None:
    if not 0 <= value <= RGB_MAX:
        raise InvalidRange(f"{name} channel must be in [0, {RGB_MAX}], got {value!r}")


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert an RGB color to HSV.

    Input:
        r, g, b ∈ [0, 255]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 100]
        v ∈ [0, 100]

    Achromatic colors (max == min) get hue 0.

    Raises:
        InvalidRange: If a channel is outside [0, 255].
    """
    _check_channel("red", r)
    _check_channel("green", g)
    _check_channel("blue", b)

    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    if delta == 0:
        h = 0.0
    elif c_max == r:
        h = (g - b) / delta + (6.0 if g < b else 0.0)
    elif c_max == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    h *= 60.0

    s = 0.0 if c_max == 0 else delta / c_max

    return h, s * PERCENT_MAX, c_max * PERCENT_MAX


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,100], value [0,100])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    for name, channel in (("red", r), ("green", g), ("blue", b)):
        if np.any((channel < 0) | (channel > RGB_MAX)):
            raise InvalidRange(f"{name} channel must be in [0, {RGB_MAX}]")

    r = r / RGB_MAX
    g = g / RGB_MAX
    b = b / RGB_MAX

    c_max = np.maximum.reduce([r, g, b])
    c_min = np.minimum.reduce([r, g, b])
    delta = c_max - c_min
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.where(
        c_max == r,
        (g - b) / safe_delta + np.where(g < b, 6.0, 0.0),
        np.where(
            c_max == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    h = np.where(delta == 0, 0.0, h) * 60.0

    safe_max = np.where(c_max == 0, 1.0, c_max)
    s = np.where(c_max == 0, 0.0, delta / safe_max)

    return np.stack([h, s * PERCENT_MAX, c_max * PERCENT_MAX], axis=-1)
