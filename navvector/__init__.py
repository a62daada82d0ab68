"""Planar and navigation-frame vectors with a polymorphic operator layer."""

from .algebra import Vector2, Vector3
from .dispatch import (
    ArityError,
    HostBinding,
    Kind,
    KindMismatchError,
    OperatorDispatcher,
    OperatorRegistry,
    UnknownOperatorError,
    VectorError,
    VectorTypeError,
    build_registry,
)

__all__ = [
    "ArityError",
    "HostBinding",
    "Kind",
    "KindMismatchError",
    "OperatorDispatcher",
    "OperatorRegistry",
    "UnknownOperatorError",
    "Vector2",
    "Vector3",
    "VectorError",
    "VectorTypeError",
    "build_registry",
]
