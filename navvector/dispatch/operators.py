"""Polymorphic operators exposed to an embedding host.

Each operator resolves its operands to tagged ``Operand`` values and routes
on the kind (or pair of kinds) to a formula in ``navvector.algebra``.
Combinations that are not listed raise immediately at the offending operand.
A missing operand arrives as None, which no kind accepts, so it raises at its
own position. Operands past the last one an operator reads are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from .. import config
from ..algebra import transforms
from ..algebra.vec2 import Vector2
from ..algebra.vec3 import Vector3
from ..formatting import format_vector
from .errors import ArityError, KindMismatchError, VectorTypeError
from .kinds import (
    DEFAULT_BINDING,
    HostBinding,
    Kind,
    Operand,
    check_number,
    check_vector2,
    check_vector3,
    resolve_operand,
)

logger = logging.getLogger(__name__)


def _dot(a, b) -> float:
    return a.dot(b)


def _scale(vec, scalar):
    return vec * scalar


def _scale_swapped(scalar, vec):
    return vec * scalar


_MUL_TABLE: dict[tuple[Kind, Kind], Callable[[Any, Any], Any]] = {
    (Kind.VECTOR3, Kind.VECTOR3): _dot,
    (Kind.VECTOR2, Kind.VECTOR2): _dot,
    (Kind.VECTOR3, Kind.SCALAR): _scale,
    (Kind.VECTOR2, Kind.SCALAR): _scale,
    (Kind.SCALAR, Kind.VECTOR3): _scale_swapped,
    (Kind.SCALAR, Kind.VECTOR2): _scale_swapped,
}

_VECTOR_KINDS = (Kind.VECTOR2, Kind.VECTOR3)


class OperatorDispatcher:
    def __init__(self, binding: HostBinding | None = None, decimals: int = config.DEFAULT_DISPLAY_DECIMALS) -> None:
        self.binding = binding or DEFAULT_BINDING
        self.decimals = decimals

    def _resolve(self, value: Any, position: int) -> Operand:
        return resolve_operand(value, position, self.binding)

    def _vector(self, value: Any, position: int) -> Operand:
        operand = self._resolve(value, position)
        if operand.kind is Kind.SCALAR:
            logger.debug("Scalar rejected at operand %d where a vector is required", position)
            raise VectorTypeError("'Vector' expected", position)
        return operand

    def _vector_pair(self, a: Any, b: Any) -> tuple[Operand, Operand]:
        first = self._vector(a, 1)
        second = self._vector(b, 2)
        if first.kind is not second.kind:
            logger.debug("Kind mismatch: %s with %s", first.kind.value, second.kind.value)
            raise KindMismatchError("Vector type mismatch", 2)
        return first, second

    def _wrap(self, vec: Vector2 | Vector3):
        if isinstance(vec, Vector3):
            return self.binding.wrap_vector3(vec)
        return self.binding.wrap_vector2(vec)

    def _number(self, value: Any, position: int) -> float:
        return check_number(value, position, self.binding)

    def new(self, *operands: Any):
        """Build a vector from its operands.

        One number gives a unit planar vector at that angle in radians, one
        vector gives a copy, two numbers a Vector2 and three numbers a Vector3.
        """
        count = len(operands)
        if count == 1:
            operand = self._resolve(operands[0], 1)
            if operand.kind is Kind.SCALAR:
                return self._wrap(transforms.unit_vector_at_angle(operand.value))
            return self._wrap(replace(operand.value))
        if count == 2:
            return self._wrap(Vector2(self._number(operands[0], 1), self._number(operands[1], 2)))
        if count == 3:
            return self._wrap(
                Vector3(
                    self._number(operands[0], 1),
                    self._number(operands[1], 2),
                    self._number(operands[2], 3),
                )
            )
        raise ArityError("Invalid size of vector")

    def add(self, a: Any = None, b: Any = None, *_rest: Any):
        first, second = self._vector_pair(a, b)
        return self._wrap(first.value + second.value)

    def sub(self, a: Any = None, b: Any = None, *_rest: Any):
        first, second = self._vector_pair(a, b)
        return self._wrap(first.value - second.value)

    def mul(self, a: Any = None, b: Any = None, *_rest: Any):
        """Dot product for two vectors of one kind, scaling for a vector and a number."""
        first = self._resolve(a, 1)
        second = self._resolve(b, 2)
        route = _MUL_TABLE.get((first.kind, second.kind))
        if route is None:
            if first.kind in _VECTOR_KINDS and second.kind in _VECTOR_KINDS:
                raise KindMismatchError("Type mismatch (invalid combination of argument types)", 2)
            raise VectorTypeError("Type mismatch (invalid combination of argument types)", 2)
        result = route(first.value, second.value)
        if isinstance(result, (Vector2, Vector3)):
            return self._wrap(result)
        return result

    def neg(self, a: Any = None, *_rest: Any):
        return self._wrap(-self._vector(a, 1).value)

    def cross(self, a: Any = None, b: Any = None, *_rest: Any):
        first = check_vector3(a, 1, self.binding)
        second = check_vector3(b, 2, self.binding)
        return self._wrap(first.cross(second))

    def length(self, a: Any = None, *_rest: Any) -> float:
        return self._vector(a, 1).value.magnitude()

    def unit(self, a: Any = None, *_rest: Any):
        return self._wrap(transforms.unit_vector(self._vector(a, 1).value))

    def rotate(self, a: Any = None, b: Any = None, c: Any = None, *_rest: Any):
        """Rotate a Vector3 about an axis, rotate(v, axis, radians), or a Vector2
        about the origin, rotate(v, radians)."""
        operand = self._vector(a, 1)
        if operand.kind is Kind.VECTOR3:
            axis = check_vector3(b, 2, self.binding)
            return self._wrap(transforms.rotate_about_axis(operand.value, axis, self._number(c, 3)))
        return self._wrap(transforms.rotate_vector2(operand.value, self._number(b, 2)))

    def lerp(self, a: Any = None, b: Any = None, t: Any = None, *_rest: Any):
        first, second = self._vector_pair(a, b)
        return self._wrap(transforms.lerp(first.value, second.value, self._number(t, 3)))

    def slerp(self, a: Any = None, b: Any = None, t: Any = None, *_rest: Any):
        start = check_vector3(a, 1, self.binding)
        finish = check_vector3(b, 2, self.binding)
        return self._wrap(transforms.slerp(start, finish, self._number(t, 3)))

    def up_and_right(self, a: Any = None, *_rest: Any) -> tuple:
        up, right = transforms.up_and_right(check_vector3(a, 1, self.binding))
        return self._wrap(up), self._wrap(right)

    def conj(self, a: Any = None, *_rest: Any):
        return self._wrap(check_vector2(a, 1, self.binding).conjugate())

    def angle(self, a: Any = None, b: Any = None, *_rest: Any) -> float:
        first, second = self._vector_pair(a, b)
        return transforms.angle_between(first.value, second.value)

    def x(self, a: Any = None, *_rest: Any) -> float:
        return check_vector3(a, 1, self.binding).x_east

    def y(self, a: Any = None, *_rest: Any) -> float:
        return check_vector3(a, 1, self.binding).y_north

    def z(self, a: Any = None, *_rest: Any) -> float:
        return check_vector3(a, 1, self.binding).z_up

    def u(self, a: Any = None, *_rest: Any) -> float:
        return check_vector2(a, 1, self.binding).u

    def v(self, a: Any = None, *_rest: Any) -> float:
        return check_vector2(a, 1, self.binding).v

    def tostring(self, a: Any = None, *_rest: Any) -> str:
        return format_vector(self._vector(a, 1).value, self.decimals)
