"""Display strings for vectors and dispatch results."""

from __future__ import annotations

from . import config
from .algebra.vec2 import Vector2
from .algebra.vec3 import Vector3


def format_vector(vec: Vector2 | Vector3, decimals: int = config.DEFAULT_DISPLAY_DECIMALS) -> str:
    """Render as (x, y, z) or (u, v) with a fixed number of decimals."""
    if isinstance(vec, Vector3):
        components = (vec.x_east, vec.y_north, vec.z_up)
    elif isinstance(vec, Vector2):
        components = (vec.u, vec.v)
    else:
        raise ValueError(f"Unsupported value for vector formatting: {vec!r}")
    return "(" + ", ".join(f"{c:.{decimals}f}" for c in components) + ")"


def format_result(value, decimals: int = config.DEFAULT_DISPLAY_DECIMALS) -> str:
    if isinstance(value, (Vector2, Vector3)):
        return format_vector(value, decimals)
    if isinstance(value, float):
        return f"{value:.{decimals}f}"
    return str(value)
