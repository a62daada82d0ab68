"""Named constructors for axis-aligned vectors.

The north/east helpers keep the established mapping: north lies along the
first component and east along the second.
"""

from __future__ import annotations

from .transforms import degrees_to_radians, unit_vector_at_angle
from .vec2 import Vector2
from .vec3 import Vector3


def axis_x(magnitude: float) -> Vector3:
    return Vector3(float(magnitude), 0.0, 0.0)


def axis_y(magnitude: float) -> Vector3:
    return Vector3(0.0, float(magnitude), 0.0)


def axis_z(magnitude: float) -> Vector3:
    return Vector3(0.0, 0.0, float(magnitude))


def meters_north(meters: float) -> Vector3:
    return Vector3(float(meters), 0.0, 0.0)


def meters_east(meters: float) -> Vector3:
    return Vector3(0.0, float(meters), 0.0)


def meters_south(meters: float) -> Vector3:
    return Vector3(-float(meters), 0.0, 0.0)


def meters_west(meters: float) -> Vector3:
    return Vector3(0.0, -float(meters), 0.0)


def meters_up(meters: float) -> Vector3:
    return Vector3(0.0, 0.0, float(meters))


def meters_down(meters: float) -> Vector3:
    return Vector3(0.0, 0.0, -float(meters))


def axis_u(magnitude: float) -> Vector2:
    return Vector2(float(magnitude), 0.0)


def axis_v(magnitude: float) -> Vector2:
    return Vector2(0.0, float(magnitude))


def heading_degrees(degrees: float) -> Vector2:
    """Unit planar vector at the given angle in degrees."""
    return unit_vector_at_angle(degrees_to_radians(degrees))
