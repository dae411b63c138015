"""Config loading and normalization."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from dxvk_cache_tool.config.model import ToolConfig
from dxvk_cache_tool.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_LOG_LEVEL,
    VALID_LOG_LEVELS,
)
from dxvk_cache_tool.exceptions import ConfigError


def default_config_path(cwd: Path | None = None) -> Path:
    """Return the implicit config location inside ``cwd`` (default: the working directory)."""
    return (cwd or Path.cwd()) / CONFIG_FILENAME


def load_config(config_path: Path | None = None, *, cwd: Path | None = None) -> ToolConfig:
    """Load and validate tool config from ``dxvk-cache-tool.yaml`` or an explicit path."""
    path = config_path.resolve() if config_path else default_config_path(cwd)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ToolConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s) in {path}: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(CONFIG_ALLOWED_KEYS))}"
        )

    log_level = raw.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.lower() not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {log_level!r}")

    return ToolConfig(
        require_extension=_ensure_bool(raw, "require_extension", False),
        color=_ensure_bool(raw, "color", True),
        log_level=log_level.lower(),  # type: ignore[arg-type]
        dry_run=_ensure_bool(raw, "dry_run", False),
    )


def _ensure_bool(raw: dict[str, Any], key_name: str, default: bool) -> bool:
    """Read a boolean option, raising ConfigError on type mismatch."""
    value = raw.get(key_name, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value
