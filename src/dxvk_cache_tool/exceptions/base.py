"""Root exception for dxvk-cache-tool."""

from __future__ import annotations

from pathlib import Path


class DxvkCacheError(Exception):
    """Base class for every error the tool raises on purpose.

    ``path`` names the cache file being processed when the error surfaced;
    operations fill it in so the CLI can report the offending file.
    """

    kind: str = "error"

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} ({self.path})"
