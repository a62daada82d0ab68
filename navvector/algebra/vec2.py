"""Planar vector value type with components u and v."""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, hypot
from numbers import Real

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """2D vector; u and v read as real/imaginary or east/north plane axes."""

    u: float
    v: float

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.u + other.u, self.v + other.v)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.u - other.u, self.v - other.v)

    def __mul__(self, other):
        """Scale by a number, or return the dot product with another Vector2."""
        if isinstance(other, Vector2):
            return self.dot(other)
        if isinstance(other, Real):
            return Vector2(self.u * other, self.v * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Real):
            return self.__mul__(scalar)
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return Vector2(self.u / scalar, self.v / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.u, -self.v)

    def __pos__(self) -> "Vector2":
        return self

    def __invert__(self) -> "Vector2":
        return self.conjugate()

    def __abs__(self) -> float:
        return self.magnitude()

    def __str__(self) -> str:
        return f"({self.u:.3f}, {self.v:.3f})"

    def dot(self, other: "Vector2") -> float:
        return self.u * other.u + self.v * other.v

    def magnitude(self) -> float:
        return hypot(self.u, self.v)

    def unit(self) -> "Vector2":
        """Return the unit vector; the zero vector is returned unchanged."""
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return self * (1.0 / mag)

    def conjugate(self) -> "Vector2":
        """Mirror about the u axis."""
        return Vector2(self.u, -self.v)

    def rotate_left(self) -> "Vector2":
        return Vector2(-self.v, self.u)

    def rotate_right(self) -> "Vector2":
        return Vector2(self.v, -self.u)

    def heading(self) -> float:
        """Angle from the u axis in radians."""
        return atan2(self.v, self.u)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.u, self.v], dtype=float)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Vector2":
        values = np.asarray(array, dtype=float).reshape(-1)
        if values.shape[0] != 2:
            raise ValueError(f"Expected 2 components, got {values.shape[0]}.")
        return cls(float(values[0]), float(values[1]))
