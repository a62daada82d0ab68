"""CSV call trace for registered operators."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Sequence

from . import config
from .dispatch.kinds import DEFAULT_BINDING, HostBinding, Kind, classify
from .formatting import format_result


class DispatchTraceLogger:
    def __init__(
        self,
        path: str | Path,
        binding: HostBinding | None = None,
        decimals: int = config.DEFAULT_DISPLAY_DECIMALS,
    ) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.binding = binding or DEFAULT_BINDING
        self.decimals = decimals
        self.rows_written = 0

        self._file = self.path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self._header())

    def _header(self) -> list[str]:
        return ["seq", "operator", "operand_kinds", "result_kind", "result", "error"]

    def _kind_name(self, value: Any) -> str:
        kind = classify(value, self.binding)
        return kind.value if kind is not None else "?"

    def _render(self, value: Any) -> str:
        kind = classify(value, self.binding)
        if kind is None:
            return str(value)
        if kind is Kind.VECTOR3:
            value = self.binding.to_vector3(value)
        elif kind is Kind.VECTOR2:
            value = self.binding.to_vector2(value)
        return format_result(value, self.decimals)

    def log(self, operator: str, operands: Sequence[Any], result: Any = None, error: Exception | None = None) -> None:
        operand_kinds = ";".join(self._kind_name(value) for value in operands)
        if error is not None:
            row = [self.rows_written, operator, operand_kinds, "", "", str(error)]
        elif isinstance(result, tuple) and classify(result, self.binding) is None:
            result_kind = ";".join(self._kind_name(item) for item in result)
            rendered = " ".join(self._render(item) for item in result)
            row = [self.rows_written, operator, operand_kinds, result_kind, rendered, ""]
        else:
            row = [self.rows_written, operator, operand_kinds, self._kind_name(result), self._render(result), ""]
        self._writer.writerow(row)
        self.rows_written += 1

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
