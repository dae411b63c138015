"""Branding constants for terminal output."""

from __future__ import annotations

TOOL_NAME: str = "dxvk-cache-tool"
CLI_DESCRIPTION: str = "\n".join(
    (
        f">_ {TOOL_NAME}",
        "     // merge, inspect and rewrite DXVK state caches",
    )
)
