"""Default configuration values for navvector."""

from __future__ import annotations

from pathlib import Path

DEFAULT_DISPLAY_DECIMALS = 3
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TRACE_PATH = None

DEFAULT_SETTINGS_PATH = Path.home() / ".navvector_settings.json"
