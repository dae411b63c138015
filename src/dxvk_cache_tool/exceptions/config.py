"""Configuration-related exceptions."""

from __future__ import annotations

from dxvk_cache_tool.exceptions.base import DxvkCacheError


class ConfigError(DxvkCacheError, ValueError):
    """Raised when tool configuration is invalid."""

    kind = "config"
