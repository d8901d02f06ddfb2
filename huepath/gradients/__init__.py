"""Two-color gradients and multi-stop transitions."""

from .gradient import gradient, np_gradient, rgb_gradient
from .transition import transition

__all__ = ["gradient", "np_gradient", "rgb_gradient", "transition"]
