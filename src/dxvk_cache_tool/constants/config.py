"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "dxvk-cache-tool.yaml"

VALID_LOG_LEVELS: frozenset[str] = frozenset({"debug", "info", "warning", "error"})
DEFAULT_LOG_LEVEL: str = "info"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"require_extension", "color", "log_level", "dry_run"})
