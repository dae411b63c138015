"""Shared exception hierarchy for dxvk-cache-tool."""

from __future__ import annotations

from .base import DxvkCacheError
from .codec import (
    DuplicateEntryError,
    EndOfEntries,
    HashMismatchError,
    InvalidVersionError,
    MagicMismatchError,
    MalformedEntryError,
    MalformedHeaderError,
    UnexpectedEofError,
)
from .config import ConfigError
from .operations import (
    EntrySizeMismatchError,
    InvalidInputExtensionError,
    NoEntriesFoundError,
    VersionMismatchError,
)

__all__ = [
    "ConfigError",
    "DuplicateEntryError",
    "DxvkCacheError",
    "EndOfEntries",
    "EntrySizeMismatchError",
    "HashMismatchError",
    "InvalidInputExtensionError",
    "InvalidVersionError",
    "MagicMismatchError",
    "MalformedEntryError",
    "MalformedHeaderError",
    "NoEntriesFoundError",
    "UnexpectedEofError",
    "VersionMismatchError",
]
