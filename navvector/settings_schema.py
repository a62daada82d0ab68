"""Schema and helpers for persisted navvector settings."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config
from .logging_config import resolve_level

logger = logging.getLogger(__name__)


@dataclass
class KernelSettings:
    display_decimals: int = config.DEFAULT_DISPLAY_DECIMALS
    log_level: str = config.DEFAULT_LOG_LEVEL
    trace_path: str | None = config.DEFAULT_TRACE_PATH

    def to_json(self) -> dict[str, Any]:
        return {
            "display_decimals": self.display_decimals,
            "log_level": self.log_level,
            "trace_path": self.trace_path,
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "KernelSettings":
        """Build settings from a decoded payload; absent keys take defaults.

        Raises ValueError for a negative decimal count or an unknown log level.
        """
        decimals = int(payload.get("display_decimals", config.DEFAULT_DISPLAY_DECIMALS))
        if decimals < 0:
            raise ValueError(f"display_decimals must be >= 0, got {decimals}")
        log_level = str(payload.get("log_level", config.DEFAULT_LOG_LEVEL)).upper()
        resolve_level(log_level)
        trace_path = payload.get("trace_path", config.DEFAULT_TRACE_PATH)
        return cls(
            display_decimals=decimals,
            log_level=log_level,
            trace_path=str(trace_path) if trace_path is not None else None,
        )


def load_settings(path: Path | None = None) -> KernelSettings:
    """Read settings from path. A missing file gives defaults silently; an
    unreadable or invalid one gives defaults with a warning."""
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    try:
        payload = json.loads(settings_path.read_text())
    except FileNotFoundError:
        return KernelSettings()
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_path, exc)
        return KernelSettings()
    if not isinstance(payload, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", settings_path)
        return KernelSettings()
    try:
        return KernelSettings.from_json(payload)
    except ValueError as exc:
        logger.warning("Ignoring settings file %s: %s", settings_path, exc)
        return KernelSettings()


def save_settings(settings: KernelSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True))
    return settings_path
