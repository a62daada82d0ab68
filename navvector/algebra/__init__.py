"""Vector algebra for planar and navigation-frame vectors."""

from .constructors import (
    axis_u,
    axis_v,
    axis_x,
    axis_y,
    axis_z,
    heading_degrees,
    meters_down,
    meters_east,
    meters_north,
    meters_south,
    meters_up,
    meters_west,
)
from .transforms import (
    angle_between,
    degrees_to_radians,
    lerp,
    radians_to_degrees,
    rotate_about_axis,
    rotate_about_point_axis,
    rotate_vector2,
    rotate_vector2_about_point,
    slerp,
    unit_vector,
    unit_vector_at_angle,
    up_and_right,
)
from .vec2 import Vector2
from .vec3 import Vector3

__all__ = [
    "Vector2",
    "Vector3",
    "angle_between",
    "axis_u",
    "axis_v",
    "axis_x",
    "axis_y",
    "axis_z",
    "degrees_to_radians",
    "heading_degrees",
    "lerp",
    "meters_down",
    "meters_east",
    "meters_north",
    "meters_south",
    "meters_up",
    "meters_west",
    "radians_to_degrees",
    "rotate_about_axis",
    "rotate_about_point_axis",
    "rotate_vector2",
    "rotate_vector2_about_point",
    "slerp",
    "unit_vector",
    "unit_vector_at_angle",
    "up_and_right",
]
