"""
huepath Color Space Conversions
===============================

Conversions between hex strings, RGB triples, HSV triples and HSV triples
whose hue is expressed in radians. Scalar functions handle single colors;
the ``np_`` functions are vectorized over numpy arrays.

Conventions
-----------
- RGB channels are integers in [0, 255]
- Hue is stored in degrees [0, 360); radians only in the HSV-radian form
- Saturation and value are percentages [0, 100]
- Hex output is always ``#rrggbb`` lowercase

Conversion Functions
--------------------

HEX ↔ RGB:
    hex_to_rgb(hex_str)
        Accepts 3, 4, 6 or 8 digits with optional ``#`` (alpha discarded)
    rgb_to_hex(r, g, b)
        Rounds and clamps each channel
    normalize_hex(hex_str)
        Canonical ``#rrggbb`` form

RGB ↔ HSV:
    rgb_to_hsv(r, g, b)
        Strict: channels outside [0, 255] raise InvalidRange
    hsv_to_rgb(h, s, v)
        Lenient: hue wraps, saturation/value clamp
    np_rgb_to_hsv(r, g, b), np_hsv_to_rgb(h, s, v)
        Vectorized counterparts

HSV ↔ HSV-radian:
    hsv_to_hsv_radian(h, s, v), hsv_radian_to_hsv(h_rad, s, v)

Compositions:
    hex_to_hsv, hsv_to_hex, hex_to_hsv_radian, hsv_radian_to_hex

Examples
--------
>>> from huepath.conversions import hex_to_rgb, rgb_to_hsv, hsv_to_hex
>>> hex_to_rgb("#f80")
(255, 136, 0)
>>> h, s, v = rgb_to_hsv(255, 136, 0)
>>> hsv_to_hex(h, s, v)
'#ff8800'
"""

from .hex import hex_to_rgb, rgb_to_hex, normalize_hex
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .to_rgb import hsv_to_rgb, np_hsv_to_rgb
from .wrapper import (
    hsv_to_hsv_radian,
    hsv_radian_to_hsv,
    hex_to_hsv,
    hsv_to_hex,
    hex_to_hsv_radian,
    hsv_radian_to_hex,
)

__all__ = [
    # HEX ↔ RGB
    'hex_to_rgb',
    'rgb_to_hex',
    'normalize_hex',

    # RGB ↔ HSV
    'rgb_to_hsv',
    'hsv_to_rgb',
    'np_rgb_to_hsv',
    'np_hsv_to_rgb',

    # HSV ↔ HSV-radian
    'hsv_to_hsv_radian',
    'hsv_radian_to_hsv',

    # Compositions
    'hex_to_hsv',
    'hsv_to_hex',
    'hex_to_hsv_radian',
    'hsv_radian_to_hex',
]
