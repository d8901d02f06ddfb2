"""Quick visual previews of a list of colors."""

from typing import Sequence

import numpy as np

from .conversions import hex_to_rgb, normalize_hex


def swatch_html(colors: Sequence[str], size: str = "5rem") -> str:
    """One square ``<div>`` per color, newline separated."""
    return "\n".join(
        f'<div style="background: {normalize_hex(color)};width:{size};height:{size}"></div>'
        for color in colors
    )


def render_strip(colors: Sequence[str], swatch_width: int = 32, height: int = 32):
    """
    Render colors side by side as a PIL image.

    Args:
        colors: Hex colors, left to right
        swatch_width: Width in pixels of each swatch
        height: Height in pixels of the strip

    Returns:
        RGB ``PIL.Image.Image`` of size ``(len(colors) * swatch_width, height)``
    """
    from PIL import Image

    if swatch_width <= 0 or height <= 0:
        raise ValueError("swatch_width and height must be positive")
    if not colors:
        raise ValueError("At least one color is required")

    row = np.array([hex_to_rgb(color) for color in colors], dtype=np.uint8)
    row = np.repeat(row, swatch_width, axis=0)
    img_array = np.broadcast_to(row, (height,) + row.shape)
    return Image.fromarray(np.ascontiguousarray(img_array))
