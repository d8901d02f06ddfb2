from __future__ import annotations
from enum import IntEnum
from typing import Literal, Union

TransitionSpace = Literal["rgb", "hsv"]
HueDirection = Literal["cw", "ccw", "clockwise", "counterclockwise", "shortest", "longest"]


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (≤180° arc) - most common
    LONGEST:  Longest path (≥180° arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


HueModeLike = Union[HueMode, HueDirection, None]
