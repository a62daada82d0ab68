"""Kind resolution and polymorphic operators for host bindings."""

from .errors import ArityError, KindMismatchError, UnknownOperatorError, VectorError, VectorTypeError
from .kinds import (
    DEFAULT_BINDING,
    HostBinding,
    Kind,
    Operand,
    check_number,
    check_vector2,
    check_vector3,
    classify,
    coerce_number,
    resolve_operand,
)
from .operators import OperatorDispatcher
from .registry import OperatorRegistry, build_registry

__all__ = [
    "ArityError",
    "DEFAULT_BINDING",
    "HostBinding",
    "Kind",
    "KindMismatchError",
    "Operand",
    "OperatorDispatcher",
    "OperatorRegistry",
    "UnknownOperatorError",
    "VectorError",
    "VectorTypeError",
    "build_registry",
    "check_number",
    "check_vector2",
    "check_vector3",
    "classify",
    "coerce_number",
    "resolve_operand",
]
