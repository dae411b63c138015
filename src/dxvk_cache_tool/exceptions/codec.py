"""Errors raised while decoding or encoding state-cache bytes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dxvk_cache_tool.exceptions.base import DxvkCacheError

if TYPE_CHECKING:
    from dxvk_cache_tool.codec.entry import Entry


class UnexpectedEofError(DxvkCacheError, EOFError):
    """Raised when the stream ends before a fixed-size field is complete."""

    kind = "unexpected-eof"

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"Unexpected end of file: needed {expected} bytes, got {received}")
        self.expected = expected
        self.received = received


class EndOfEntries(UnexpectedEofError):
    """Raised when the stream ends exactly on an entry boundary.

    Decoders treat this as the normal end of a cache file.
    """

    def __init__(self, expected: int) -> None:
        super().__init__(expected, 0)


class MagicMismatchError(DxvkCacheError, ValueError):
    """Raised when a file header does not start with ``DXVK``."""

    kind = "magic-mismatch"

    def __init__(self, found: bytes) -> None:
        super().__init__(f"Magic string mismatch: found {found!r}, expected b'DXVK'")
        self.found = found


class InvalidVersionError(DxvkCacheError, ValueError):
    """Raised when a file header carries version zero."""

    kind = "invalid-version"

    def __init__(self) -> None:
        super().__init__("Header contained invalid zero version")


class MalformedHeaderError(DxvkCacheError, ValueError):
    """Raised when header fields cannot describe any valid entry."""

    kind = "malformed-header"


class HashMismatchError(DxvkCacheError, ValueError):
    """Raised when an entry's stored hash does not match its payload."""

    kind = "hash-mismatch"

    def __init__(self, entry: Entry) -> None:
        super().__init__("Entry invalid due to hash mismatch")
        self.entry = entry


class DuplicateEntryError(DxvkCacheError, ValueError):
    """Raised when a strict insertion meets a hash already in the cache."""

    kind = "duplicate-entry"

    def __init__(self, entry: Entry) -> None:
        super().__init__(f"Duplicate cache entry {entry.hash.hex()}")
        self.entry = entry


class MalformedEntryError(DxvkCacheError, ValueError):
    """Raised when an entry does not fit the layout of its cache file."""

    kind = "malformed-entry"
