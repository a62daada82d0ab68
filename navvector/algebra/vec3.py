"""Spatial vector in a right-handed east/north/up navigation frame."""

from __future__ import annotations

from dataclasses import dataclass
from math import hypot
from numbers import Real

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """3D vector with components along east, north and up."""

    x_east: float
    y_north: float
    z_up: float

    @property
    def x(self) -> float:
        return self.x_east

    @property
    def y(self) -> float:
        return self.y_north

    @property
    def z(self) -> float:
        return self.z_up

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x_east + other.x_east, self.y_north + other.y_north, self.z_up + other.z_up)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x_east - other.x_east, self.y_north - other.y_north, self.z_up - other.z_up)

    def __mul__(self, other):
        """Scale by a number, or return the dot product with another Vector3."""
        if isinstance(other, Vector3):
            return self.dot(other)
        if isinstance(other, Real):
            return Vector3(self.x_east * other, self.y_north * other, self.z_up * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vector3":
        if isinstance(scalar, Real):
            return self.__mul__(scalar)
        return NotImplemented

    def __truediv__(self, other):
        """Cross product with another Vector3, or division by a number."""
        if isinstance(other, Vector3):
            return self.cross(other)
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ValueError("Cannot divide by zero.")
        return Vector3(self.x_east / other, self.y_north / other, self.z_up / other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x_east, -self.y_north, -self.z_up)

    def __pos__(self) -> "Vector3":
        return self

    def __abs__(self) -> float:
        return self.magnitude()

    def __str__(self) -> str:
        return f"({self.x_east:.3f}, {self.y_north:.3f}, {self.z_up:.3f})"

    def dot(self, other: "Vector3") -> float:
        return self.x_east * other.x_east + self.y_north * other.y_north + self.z_up * other.z_up

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y_north * other.z_up - self.z_up * other.y_north,
            self.z_up * other.x_east - self.x_east * other.z_up,
            self.x_east * other.y_north - self.y_north * other.x_east,
        )

    def magnitude(self) -> float:
        return hypot(hypot(self.x_east, self.y_north), self.z_up)

    def unit(self) -> "Vector3":
        """Return the unit vector; the zero vector is returned unchanged."""
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return self * (1.0 / mag)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x_east, self.y_north, self.z_up], dtype=float)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Vector3":
        values = np.asarray(array, dtype=float).reshape(-1)
        if values.shape[0] != 3:
            raise ValueError(f"Expected 3 components, got {values.shape[0]}.")
        return cls(float(values[0]), float(values[1]), float(values[2]))
