"""Errors raised by operations spanning one or more cache files."""

from __future__ import annotations

from pathlib import Path

from dxvk_cache_tool.exceptions.base import DxvkCacheError


class VersionMismatchError(DxvkCacheError, ValueError):
    """Raised when caches of different versions are combined."""

    kind = "version-mismatch"

    def __init__(self, expected: int, found: int, *, path: Path | None = None) -> None:
        super().__init__(f"State cache version mismatch: expected v{expected}, found v{found}", path=path)
        self.expected = expected
        self.found = found


class EntrySizeMismatchError(DxvkCacheError, ValueError):
    """Raised when legacy caches with different fixed entry sizes are combined."""

    kind = "entry-size-mismatch"

    def __init__(self, expected: int, found: int, *, path: Path | None = None) -> None:
        super().__init__(f"Legacy entry size mismatch: expected {expected}, found {found}", path=path)
        self.expected = expected
        self.found = found


class NoEntriesFoundError(DxvkCacheError):
    """Raised when an operation would produce a cache without entries."""

    kind = "no-entries-found"

    def __init__(self, *, path: Path | None = None) -> None:
        super().__init__("No valid state cache entries found", path=path)


class InvalidInputExtensionError(DxvkCacheError, ValueError):
    """Raised when extension checks are enabled and an input lacks ``.dxvk-cache``."""

    kind = "invalid-input-extension"

    def __init__(self, found: str | None, *, path: Path | None = None) -> None:
        super().__init__(f"File extension mismatch: found {found!r}, expected .dxvk-cache", path=path)
        self.found = found
