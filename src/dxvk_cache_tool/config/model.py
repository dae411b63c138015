"""Config data model for dxvk-cache-tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dxvk_cache_tool.constants.config import DEFAULT_LOG_LEVEL
from dxvk_cache_tool.types import LogLevel


@dataclass(frozen=True)
class ToolConfig:
    """Resolved tool config."""

    require_extension: bool = False
    color: bool = True
    log_level: LogLevel = DEFAULT_LOG_LEVEL  # type: ignore[assignment]
    dry_run: bool = False

    @property
    def logging_level(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level.upper()]
