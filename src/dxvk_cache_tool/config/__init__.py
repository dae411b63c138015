"""Configuration loading and validation for dxvk-cache-tool."""

from __future__ import annotations

from dxvk_cache_tool.config.loader import default_config_path, load_config
from dxvk_cache_tool.config.model import ToolConfig

__all__ = ["ToolConfig", "default_config_path", "load_config"]
