"""Immutable operator tables handed to a host binding layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .errors import UnknownOperatorError
from .kinds import Kind, classify
from .operators import OperatorDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperatorRegistry:
    dispatcher: OperatorDispatcher
    library: Mapping[str, Callable[..., Any]]
    vector3_methods: Mapping[str, Callable[..., Any]]
    vector2_methods: Mapping[str, Callable[..., Any]]
    nzero: Any
    pzero: Any

    def methods_for(self, kind: Kind) -> Mapping[str, Callable[..., Any]]:
        if kind is Kind.VECTOR3:
            return self.vector3_methods
        if kind is Kind.VECTOR2:
            return self.vector2_methods
        raise UnknownOperatorError(f"No method table for kind '{kind.value}'")

    def call(self, name: str, *operands: Any):
        """Call a library function, or a method of the first vector operand's kind.

        Only the first two operands are searched for a vector, so 2 * v finds
        the method table of v.
        """
        if name in self.library:
            return self.library[name](*operands)
        for value in operands[:2]:
            kind = classify(value, self.dispatcher.binding)
            if kind in (Kind.VECTOR2, Kind.VECTOR3):
                table = self.methods_for(kind)
                if name in table:
                    return table[name](*operands)
                break
        raise UnknownOperatorError(f"Unknown operator '{name}'")


def _traced(name: str, func: Callable[..., Any], trace) -> Callable[..., Any]:
    def wrapper(*operands):
        try:
            result = func(*operands)
        except Exception as exc:
            trace.log(name, operands, error=exc)
            raise
        trace.log(name, operands, result=result)
        return result

    wrapper.__name__ = name
    wrapper.__doc__ = func.__doc__
    return wrapper


def _freeze(table: dict[str, Callable[..., Any]], trace) -> Mapping[str, Callable[..., Any]]:
    if trace is not None:
        table = {name: _traced(name, func, trace) for name, func in table.items()}
    return MappingProxyType(table)


def build_registry(dispatcher: OperatorDispatcher | None = None, trace=None) -> OperatorRegistry:
    """Build the operator tables and the two zero-vector constants.

    trace, when given, needs a log(operator, operands, result=..., error=...)
    method and receives every call made through the tables.
    """
    ops = dispatcher or OperatorDispatcher()

    library = {
        "new": ops.new,
        "length": ops.length,
        "unit": ops.unit,
        "rotate": ops.rotate,
        "lerp": ops.lerp,
    }
    vector3_methods = {
        "add": ops.add,
        "sub": ops.sub,
        "mul": ops.mul,
        "cross": ops.cross,
        "length": ops.length,
        "unit": ops.unit,
        "rotate": ops.rotate,
        "lerp": ops.lerp,
        "slerp": ops.slerp,
        "upAndRight": ops.up_and_right,
        "x": ops.x,
        "y": ops.y,
        "z": ops.z,
        "angle": ops.angle,
        "__tostring": ops.tostring,
        "__add": ops.add,
        "__sub": ops.sub,
        "__mul": ops.mul,
        "__mod": ops.cross,
        "__unm": ops.neg,
        "__len": ops.length,
        "__bnot": ops.unit,
    }
    vector2_methods = {
        "add": ops.add,
        "sub": ops.sub,
        "mul": ops.mul,
        "length": ops.length,
        "unit": ops.unit,
        "rotate": ops.rotate,
        "lerp": ops.lerp,
        "conj": ops.conj,
        "u": ops.u,
        "v": ops.v,
        "angle": ops.angle,
        "__tostring": ops.tostring,
        "__add": ops.add,
        "__sub": ops.sub,
        "__mul": ops.mul,
        "__unm": ops.neg,
        "__len": ops.length,
        "__bnot": ops.unit,
    }

    registry = OperatorRegistry(
        dispatcher=ops,
        library=_freeze(library, trace),
        vector3_methods=_freeze(vector3_methods, trace),
        vector2_methods=_freeze(vector2_methods, trace),
        nzero=ops.new(0.0, 0.0, 0.0),
        pzero=ops.new(0.0, 0.0),
    )
    logger.debug(
        "Built operator registry: %d library, %d vector3, %d vector2 entries",
        len(registry.library),
        len(registry.vector3_methods),
        len(registry.vector2_methods),
    )
    return registry

