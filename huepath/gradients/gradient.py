from __future__ import annotations

import math
from typing import List

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import (
    hex_to_rgb,
    rgb_to_hex,
    hex_to_hsv_radian,
    hsv_radian_to_hex,
    np_hsv_to_rgb,
)
from ..exceptions import PreconditionViolation
from ..types.color_types import HueModeLike
from ..utils.interpolate import angular, linear, np_angular, np_linear, resolve_hue_mode


def _check_count(count: int) -> int:
    if count < 1:
        raise PreconditionViolation(f"A gradient needs at least one color, got count={count}")
    return count - 1


def gradient(
    from_hex: str,
    to_hex: str,
    count: int,
    hue_mode: HueModeLike = None,
) -> List[str]:
    """
    Generate ``count`` colors from one color to another through HSV space.

    Hue travels along the circle (shortest arc unless ``hue_mode`` says
    otherwise) while saturation and value move linearly. The first color is
    ``from_hex`` and, when ``count > 1``, the last is ``to_hex``. A single-color
    request returns ``[to_hex]``.

    Args:
        from_hex: Start color
        to_hex: End color
        count: Number of colors to produce (>= 1)
        hue_mode: HueMode or direction string; None means shortest

    Returns:
        List of ``#rrggbb`` strings

    Raises:
        InvalidFormat: If either endpoint is not a hex color.
        PreconditionViolation: If ``count < 1``.
    """
    steps = _check_count(count)
    mode = resolve_hue_mode(hue_mode)
    from_h, from_s, from_v = hex_to_hsv_radian(from_hex)
    to_h, to_s, to_v = hex_to_hsv_radian(to_hex)

    return [
        hsv_radian_to_hex(
            angular(from_h, to_h, n, steps, mode),
            linear(from_s, to_s, n, steps),
            linear(from_v, to_v, n, steps),
        )
        for n in range(count)
    ]


def np_gradient(
    from_hex: str,
    to_hex: str,
    count: int,
    hue_mode: HueModeLike = None,
) -> NDArray:
    """Same colors as :func:`gradient`, as a ``(count, 3)`` uint8 RGB array."""
    steps = _check_count(count)
    mode = resolve_hue_mode(hue_mode)
    from_h, from_s, from_v = hex_to_hsv_radian(from_hex)
    to_h, to_s, to_v = hex_to_hsv_radian(to_hex)

    n = np.arange(count)
    hue = np_angular(from_h, to_h, n, steps, mode) * 180.0 / math.pi
    saturation = np_linear(from_s, to_s, n, steps)
    value = np_linear(from_v, to_v, n, steps)
    return np_hsv_to_rgb(hue, saturation, value)


def rgb_gradient(from_hex: str, to_hex: str, count: int) -> List[str]:
    """Generate ``count`` colors by interpolating each RGB channel linearly."""
    steps = _check_count(count)
    start = hex_to_rgb(from_hex)
    end = hex_to_rgb(to_hex)

    return [
        rgb_to_hex(*(linear(a, b, n, steps) for a, b in zip(start, end)))
        for n in range(count)
    ]
