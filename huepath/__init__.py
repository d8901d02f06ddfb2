"""
huepath - Hue-aware color gradients
===================================

Color space conversions (HEX ↔ RGB ↔ HSV) and gradients that walk the hue
circle along the shorter arc while saturation and value move linearly.

Key Features
------------
- Hex parsing of 3, 4, 6 and 8 digit forms (alpha discarded)
- RGB ↔ HSV conversions, scalar and vectorized
- Shortest-arc hue interpolation (or longest / clockwise / counterclockwise)
- Two-color gradients and multi-stop transitions with a fixed step budget
- HTML and PIL previews of the resulting colors

Quick Start
-----------
>>> from huepath import gradient, transition
>>>
>>> gradient("#ff0000", "#0000ff", 2)
['#ff0000', '#0000ff']
>>>
>>> transition(["#ff0000", "#0000ff"], 3)
['#ff0000', '#800080', '#0000ff']

Modules
-------
- conversions: Color space conversion functions
- utils.interpolate: Linear and angular interpolation
- utils.gaps: Step distribution across transition gaps
- gradients: Gradient and transition builders
- render: HTML swatches and image strips
"""

from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    normalize_hex,
    rgb_to_hsv,
    hsv_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    hsv_to_hsv_radian,
    hsv_radian_to_hsv,
    hex_to_hsv,
    hsv_to_hex,
    hex_to_hsv_radian,
    hsv_radian_to_hex,
)
from .exceptions import HuePathError, InvalidFormat, InvalidRange, PreconditionViolation
from .types.color_types import HueMode
from .utils.interpolate import linear, angular, np_linear, np_angular, resolve_hue_mode
from .utils.gaps import allocate_gaps
from .gradients import gradient, np_gradient, rgb_gradient, transition
from .render import swatch_html, render_strip

__version__ = "1.0.0"

__all__ = [
    # Conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "np_rgb_to_hsv",
    "np_hsv_to_rgb",
    "hsv_to_hsv_radian",
    "hsv_radian_to_hsv",
    "hex_to_hsv",
    "hsv_to_hex",
    "hex_to_hsv_radian",
    "hsv_radian_to_hex",

    # Errors
    "HuePathError",
    "InvalidFormat",
    "InvalidRange",
    "PreconditionViolation",

    # Interpolation
    "HueMode",
    "linear",
    "angular",
    "np_linear",
    "np_angular",
    "resolve_hue_mode",
    "allocate_gaps",

    # Gradients
    "gradient",
    "np_gradient",
    "rgb_gradient",
    "transition",

    # Previews
    "swatch_html",
    "render_strip",

    # Version
    "__version__",
]
