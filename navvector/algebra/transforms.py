"""Rotations and interpolation over planar and spatial vectors (radians throughout)."""

from __future__ import annotations

from math import acos, cos, nan, pi, sin, sqrt
from typing import TypeVar

from .vec2 import Vector2
from .vec3 import Vector3

VectorT = TypeVar("VectorT", Vector2, Vector3)

WORLD_UP = Vector3(0.0, 0.0, 1.0)


def degrees_to_radians(degrees: float) -> float:
    return degrees / 180.0 * pi


def radians_to_degrees(radians: float) -> float:
    return radians / pi * 180.0


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def unit_vector(vec: VectorT) -> VectorT:
    """Scale to unit length; the zero vector maps to itself."""
    return vec.unit()


def unit_vector_at_angle(theta: float) -> Vector2:
    """Unit planar vector at theta radians from the u axis."""
    return Vector2(cos(theta), sin(theta))


def rotate_vector2(vec: Vector2, angle_rad: float) -> Vector2:
    """Rotate a planar vector about the origin by angle_rad (radians)."""
    cos_a = cos(angle_rad)
    sin_a = sin(angle_rad)
    return Vector2(
        vec.u * cos_a - vec.v * sin_a,
        vec.u * sin_a + vec.v * cos_a,
    )


def rotate_vector2_about_point(vec: Vector2, point: Vector2, angle_rad: float) -> Vector2:
    """Rotate a planar point around another point by angle_rad (radians)."""
    return rotate_vector2(vec - point, angle_rad) + point


def rotate_about_axis(vec: Vector3, axis: Vector3, angle_rad: float) -> Vector3:
    """Rodrigues rotation of vec about axis by angle_rad.

    The axis is used as given. The result is a rigid rotation only when the
    axis has unit length.
    """
    cos_a = cos(angle_rad)
    sin_a = sin(angle_rad)
    return vec * cos_a + axis.cross(vec) * sin_a + axis * ((1.0 - cos_a) * axis.dot(vec))


def rotate_about_point_axis(vec: Vector3, origin: Vector3, axis: Vector3, angle_rad: float) -> Vector3:
    """Rotate about an axis passing through origin."""
    return rotate_about_axis(vec - origin, axis, angle_rad) + origin


def lerp(start: VectorT, finish: VectorT, t: float) -> VectorT:
    """Linear interpolation; t is not clamped, so values outside [0, 1] extrapolate."""
    return start * (1.0 - t) + finish * t


def slerp(unit_start: Vector3, unit_finish: Vector3, t: float) -> Vector3:
    """Spherical interpolation between two unit vectors.

    Inputs are not normalised. Identical inputs return unit_start for any t.
    Antiparallel inputs have no defined great circle and give NaN components.
    """
    if unit_start == unit_finish:
        return unit_start

    cos_omega = _clamp_unit(unit_start.dot(unit_finish))
    omega = acos(cos_omega)
    sin_omega = sqrt(1.0 - cos_omega * cos_omega)
    if sin_omega == 0.0:
        return Vector3(nan, nan, nan)
    start_weight = sin(omega * (1.0 - t)) / sin_omega
    finish_weight = sin(omega * t) / sin_omega
    return unit_start * start_weight + unit_finish * finish_weight


def angle_between(a: VectorT, b: VectorT) -> float:
    """Angle in radians between two vectors of the same kind."""
    return acos(_clamp_unit(a.unit().dot(b.unit())))


def up_and_right(forward: Vector3) -> tuple[Vector3, Vector3]:
    """Return (up, right) for a local frame looking along forward.

    A purely vertical forward vector falls back to the world axes with the
    sign of z_up; a zero forward vector gives zero vectors for both.
    """
    if forward.x_east == 0.0 and forward.y_north == 0.0:
        if forward.z_up == 0.0:
            return Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0)
        if forward.z_up > 0.0:
            return Vector3(0.0, 1.0, 0.0), Vector3(1.0, 0.0, 0.0)
        return Vector3(0.0, -1.0, 0.0), Vector3(-1.0, 0.0, 0.0)

    right = forward.cross(WORLD_UP).unit()
    up = right.cross(forward).unit()
    return up, right
