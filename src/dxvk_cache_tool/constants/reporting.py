"""Constants for report output, atomic writing, and stdout formatting."""

from __future__ import annotations

CACHE_TEMP_PREFIX: str = ".tmp-"
CACHE_TEMP_SUFFIX: str = ".dxvk-cache"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"
