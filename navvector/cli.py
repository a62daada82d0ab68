"""Command-line runner that evaluates one registered operator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .algebra.vec2 import Vector2
from .algebra.vec3 import Vector3
from .dispatch.errors import VectorError
from .dispatch.operators import OperatorDispatcher
from .dispatch.registry import build_registry
from .formatting import format_result
from .logging_config import setup_logging
from .settings_schema import load_settings
from .trace import DispatchTraceLogger

logger = logging.getLogger(__name__)


def _parse_operand(token: str) -> float | Vector2 | Vector3:
    """Parse a number or a '(a, b)' / '(a, b, c)' vector literal."""
    text = token.strip()
    if text.startswith("(") and text.endswith(")"):
        try:
            values = [float(part) for part in text[1:-1].split(",")]
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid vector literal: {token!r}") from exc
        if len(values) == 2:
            return Vector2(*values)
        if len(values) == 3:
            return Vector3(*values)
        raise argparse.ArgumentTypeError(f"vector literal needs 2 or 3 components: {token!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid operand: {token!r}") from exc


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="navvector", description="Evaluate a navvector operator.")
    parser.add_argument("operator", help="Operator name, e.g. new, mul, rotate, upAndRight.")
    parser.add_argument(
        "operands",
        nargs="*",
        type=_parse_operand,
        help="Numbers or vector literals such as '(1, 0, 0)'.",
    )
    parser.add_argument("--settings", type=str, default=str(config.DEFAULT_SETTINGS_PATH), help="Path to settings JSON.")
    parser.add_argument("--decimals", type=int, default=None, help="Decimals used when printing results.")
    parser.add_argument("--log", type=str, default=None, help="CSV call trace path.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings(Path(args.settings))

    decimals = args.decimals if args.decimals is not None else settings.display_decimals
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    trace_path = args.log or settings.trace_path
    trace_ctx = DispatchTraceLogger(trace_path, decimals=decimals) if trace_path else None
    dispatcher = OperatorDispatcher(decimals=decimals)
    try:
        registry = build_registry(dispatcher, trace=trace_ctx)
        logger.debug("Evaluating %s with %d operand(s)", args.operator, len(args.operands))
        result = registry.call(args.operator, *args.operands)
    except VectorError as exc:
        print(f"navvector: error: {exc}", file=sys.stderr)
        return 1
    finally:
        if trace_ctx:
            trace_ctx.close()

    results = result if isinstance(result, tuple) else (result,)
    for item in results:
        print(format_result(item, decimals))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
