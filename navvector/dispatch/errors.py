"""Errors raised by the operator dispatch layer."""

from __future__ import annotations


class VectorError(Exception):
    """Base error; position is the 1-based operand that was rejected, if any."""

    def __init__(self, detail: str, position: int | None = None) -> None:
        self.detail = detail
        self.position = position
        if position is None:
            message = detail
        else:
            message = f"bad argument #{position} ({detail})"
        super().__init__(message)


class ArityError(VectorError, ValueError):
    """Wrong number of operands for a constructor."""


class VectorTypeError(VectorError, TypeError):
    """Operand kind is not accepted at its position."""


class KindMismatchError(VectorTypeError):
    """Two vector operands are of different kinds."""


class UnknownOperatorError(VectorError, LookupError):
    """No operator is registered under the requested name."""
