import math
from typing import Tuple

from .hex import hex_to_rgb, rgb_to_hex
from .to_hsv import rgb_to_hsv
from .to_rgb import hsv_to_rgb


def hsv_to_hsv_radian(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Express the hue of an HSV color in radians."""
    return h * math.pi / 180.0, s, v


def hsv_radian_to_hsv(h_rad: float, s: float, v: float) -> Tuple[float, float, float]:
    """Express the hue of an HSV-radian color in degrees."""
    return h_rad * 180.0 / math.pi, s, v


def hex_to_hsv(hex_str: str) -> Tuple[float, float, float]:
    return rgb_to_hsv(*hex_to_rgb(hex_str))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hex_to_hsv_radian(hex_str: str) -> Tuple[float, float, float]:
    return hsv_to_hsv_radian(*hex_to_hsv(hex_str))


def hsv_radian_to_hex(h_rad: float, s: float, v: float) -> str:
    return hsv_to_hex(*hsv_radian_to_hsv(h_rad, s, v))
