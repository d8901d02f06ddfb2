from __future__ import annotations

from typing import List, Sequence

from ..conversions import normalize_hex
from ..types.color_types import HueModeLike, TransitionSpace
from ..utils.gaps import allocate_gaps
from .gradient import gradient, rgb_gradient


def transition(
    colors: Sequence[str],
    total_steps: int,
    include_start: bool = True,
    space: TransitionSpace = "rgb",
    hue_mode: HueModeLike = None,
) -> List[str]:
    """
    Build a multi-stop transition through every color in ``colors``.

    The ``total_steps - len(colors)`` generated colors are split across the
    gaps between adjacent stops by :func:`allocate_gaps`, extra colors going
    to the rightmost gaps. Each gap is followed by its right-hand stop.

    Args:
        colors: Ordered stops (at least two hex colors)
        total_steps: Length of the result, stops included (>= len(colors))
        include_start: Emit ``colors[0]`` first. When False the result starts
            with the first gap and holds ``total_steps - 1`` colors.
        space: ``"rgb"`` interpolates RGB channels linearly; ``"hsv"`` walks
            the hue circle like :func:`gradient`
        hue_mode: Hue direction for ``space="hsv"``

    Returns:
        List of ``#rrggbb`` strings

    Raises:
        PreconditionViolation: Fewer than two colors or too few steps.
        InvalidFormat: A stop is not a hex color.
        ValueError: Unknown ``space``.

    Example:
        >>> transition(["#ff0000", "#0000ff"], 3)
        ['#ff0000', '#800080', '#0000ff']
    """
    gaps = allocate_gaps(len(colors), total_steps)
    if space not in ("rgb", "hsv"):
        raise ValueError(f"Unknown space: {space}")

    stops = [normalize_hex(color) for color in colors]

    result = [stops[0]] if include_start else []
    for left, right, gap in zip(stops[:-1], stops[1:], gaps):
        count = int(gap) + 2
        if space == "hsv":
            between = gradient(left, right, count, hue_mode)[1:-1]
        else:
            between = rgb_gradient(left, right, count)[1:-1]
        result.extend(between)
        result.append(right)

    return result
