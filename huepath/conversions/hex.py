import re
from typing import Tuple

from boundednumbers import clamp

from ..exceptions import InvalidFormat
from ..types.format_type import RGB_MAX

_SIX_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


def _hex_digits(hex_str: str) -> str:
    """
    Reduce any accepted hex form to six lowercase digits.

    Accepts ``rgb``, ``rgba``, ``rrggbb`` and ``rrggbbaa`` with an optional
    leading ``#``. Alpha digits are discarded.
    """
    if not isinstance(hex_str, str):
        raise InvalidFormat(f"Expected a hex color string, got {type(hex_str).__name__}")

    digits = hex_str[1:] if hex_str.startswith("#") else hex_str

    if len(digits) == 8:
        digits = digits[:6]
    elif len(digits) == 4:
        digits = digits[:3]

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    if not _SIX_HEX_DIGITS.fullmatch(digits):
        raise InvalidFormat(f"Invalid hex color: {hex_str!r}")

    return digits.lower()


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    """
    Convert a hex color string to an RGB tuple.

    Raises:
        InvalidFormat: If the string is not a 3, 4, 6 or 8 digit hex color.
    """
    digits = _hex_digits(hex_str)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB channels to ``#rrggbb``, rounding and clamping each channel."""
    r, g, b = (int(clamp(round(c), 0, RGB_MAX)) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(hex_str: str) -> str:
    """Return the canonical ``#rrggbb`` form of an accepted hex color."""
    return "#" + _hex_digits(hex_str)
