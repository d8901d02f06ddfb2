import math
import warnings
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from boundednumbers import clamp

from ..types.format_type import HUE_360, RGB_MAX, PERCENT_MAX, CLAMP_TOLERANCE


def _clamp_percent(name: str, value: float) -> float:
    if value < -CLAMP_TOLERANCE or value > PERCENT_MAX + CLAMP_TOLERANCE:
        warnings.warn(
            f"{name} {value!r} outside [0, {PERCENT_MAX:g}], clamping",
            RuntimeWarning,
            stacklevel=3,
        )
    return clamp(value, 0.0, PERCENT_MAX)


def _to_channel(unit: float) -> int:
    return int(clamp(round(unit * RGB_MAX), 0, RGB_MAX))


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """
    Convert an HSV color to RGB.

    Hue is wrapped into [0, 360); saturation and value are clamped into
    [0, 100]. Channels are rounded to the nearest integer.

    Args:
        h: Hue in degrees
        s: Saturation [0, 100]
        v: Value [0, 100]

    Returns:
        (r, g, b) with each channel in [0, 255]
    """
    h = h % HUE_360
    s = _clamp_percent("saturation", s) / PERCENT_MAX
    v = _clamp_percent("value", v) / PERCENT_MAX

    if s == 0:
        channel = _to_channel(v)
        return channel, channel, channel

    sector_pos = h / 60.0
    sector = math.floor(sector_pos)
    f = sector_pos - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector % 6]

    return _to_channel(r), _to_channel(g), _to_channel(b)


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB.

    Args:
        h: array-like or scalar, hue in degrees (wrapped)
        s: array-like or scalar, [0,100] saturation (clamped)
        v: array-like or scalar, [0,100] value (clamped)

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    for name, channel in (("saturation", s), ("value", v)):
        if np.any((channel < -CLAMP_TOLERANCE) | (channel > PERCENT_MAX + CLAMP_TOLERANCE)):
            warnings.warn(
                f"{name} outside [0, {PERCENT_MAX:g}], clamping",
                RuntimeWarning,
                stacklevel=2,
            )

    h = np.mod(h, HUE_360)
    s = np.clip(s, 0.0, PERCENT_MAX) / PERCENT_MAX
    v = np.clip(v, 0.0, PERCENT_MAX) / PERCENT_MAX

    sector_pos = h / 60.0
    sector = np.floor(sector_pos)
    f = sector_pos - sector
    sector = sector.astype(int) % 6
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    conditions = [sector == 0, sector == 1, sector == 2, sector == 3, sector == 4]
    r = np.select(conditions, [v, q, p, p, t], default=v)
    g = np.select(conditions, [t, v, v, q, p], default=p)
    b = np.select(conditions, [p, p, t, v, v], default=q)

    rgb = np.stack([r, g, b], axis=-1)
    return np.clip(np.round(rgb * RGB_MAX), 0, RGB_MAX).astype(np.uint8)
