"""Operand classification for the dispatch layer.

Host values arrive opaque. A ``HostBinding`` supplies the accessors that
coerce a value to a number or extract one of the vector kinds, and the
wrappers that turn kernel results back into host values.

Classification order is number, then Vector3, then Vector2. A host value that
more than one accessor accepts is therefore always resolved the same way.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Callable

from ..algebra.vec2 import Vector2
from ..algebra.vec3 import Vector3
from .errors import VectorTypeError

logger = logging.getLogger(__name__)


class Kind(Enum):
    SCALAR = "scalar"
    VECTOR2 = "vector2"
    VECTOR3 = "vector3"


@dataclass(frozen=True)
class Operand:
    """Operand tagged with its resolved kind."""

    kind: Kind
    value: float | Vector2 | Vector3
    position: int


_DECIMAL_NUMERAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_HEX_NUMERAL = re.compile(r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)([pP][+-]?\d+)?")


def _parse_numeral(text: str) -> float | None:
    text = text.strip()
    if _DECIMAL_NUMERAL.fullmatch(text):
        return float(text)
    if _HEX_NUMERAL.fullmatch(text):
        return float.fromhex(text)
    return None


def coerce_number(value: Any) -> float | None:
    """Return value as a float, or None when it is not numeric.

    Booleans are not numbers. Strings follow the scripting host's numeral
    syntax: decimal or 0x-prefixed hexadecimal, surrounding whitespace
    allowed. Python-only spellings such as "1_000", "nan" and "inf" are
    rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        return _parse_numeral(value)
    return None


def _native_vector3(value: Any) -> Vector3 | None:
    return value if isinstance(value, Vector3) else None


def _native_vector2(value: Any) -> Vector2 | None:
    return value if isinstance(value, Vector2) else None


def _identity(value):
    return value


@dataclass(frozen=True)
class HostBinding:
    to_number: Callable[[Any], float | None] = coerce_number
    to_vector3: Callable[[Any], Vector3 | None] = _native_vector3
    to_vector2: Callable[[Any], Vector2 | None] = _native_vector2
    wrap_vector3: Callable[[Vector3], Any] = _identity
    wrap_vector2: Callable[[Vector2], Any] = _identity


DEFAULT_BINDING = HostBinding()


def classify(value: Any, binding: HostBinding = DEFAULT_BINDING) -> Kind | None:
    """Return the kind of value without raising."""
    if binding.to_number(value) is not None:
        return Kind.SCALAR
    if binding.to_vector3(value) is not None:
        return Kind.VECTOR3
    if binding.to_vector2(value) is not None:
        return Kind.VECTOR2
    return None


def resolve_operand(value: Any, position: int, binding: HostBinding = DEFAULT_BINDING) -> Operand:
    number = binding.to_number(value)
    if number is not None:
        return Operand(Kind.SCALAR, number, position)
    vec3 = binding.to_vector3(value)
    if vec3 is not None:
        return Operand(Kind.VECTOR3, vec3, position)
    vec2 = binding.to_vector2(value)
    if vec2 is not None:
        return Operand(Kind.VECTOR2, vec2, position)
    logger.debug("Operand %d (%r) matches no kind", position, value)
    raise VectorTypeError("'Vector' expected", position)


def check_number(value: Any, position: int, binding: HostBinding = DEFAULT_BINDING) -> float:
    number = binding.to_number(value)
    if number is None:
        raise VectorTypeError("number expected", position)
    return number


def check_vector3(value: Any, position: int, binding: HostBinding = DEFAULT_BINDING) -> Vector3:
    vec = binding.to_vector3(value)
    if vec is None:
        raise VectorTypeError("'Vector3' expected", position)
    return vec


def check_vector2(value: Any, position: int, binding: HostBinding = DEFAULT_BINDING) -> Vector2:
    vec = binding.to_vector2(value)
    if vec is None:
        raise VectorTypeError("'Vector2' expected", position)
    return vec
