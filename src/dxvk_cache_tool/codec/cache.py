"""Insertion-ordered, hash-keyed container for state-cache entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from dxvk_cache_tool.codec.entry import Entry, check_entry_layout, iter_entries, write_entry
from dxvk_cache_tool.codec.header import FileHeader, read_header, write_header
from dxvk_cache_tool.exceptions import (
    DuplicateEntryError,
    HashMismatchError,
    NoEntriesFoundError,
    VersionMismatchError,
)
from dxvk_cache_tool.types import Edition, Reader, Writer

logger = logging.getLogger(__name__)


class StateCache:
    """A file header plus a set of entries keyed by their 20-byte hash.

    Iteration yields entries in the order they were first inserted, which is
    also the order ``write_to`` encodes them.
    """

    def __init__(self, header: FileHeader, entries: Iterable[Entry] = ()) -> None:
        self.header = header
        self._entries: dict[bytes, Entry] = {}
        for entry in entries:
            self.insert_strict(entry)

    @property
    def version(self) -> int:
        return self.header.version

    @property
    def edition(self) -> Edition:
        return self.header.edition

    @classmethod
    def from_stream(cls, reader: Reader) -> StateCache:
        """Decode a whole cache file, rejecting corrupt and duplicate entries."""
        cache = cls(read_header(reader))
        for entry in iter_entries(reader, cache.header):
            cache.insert_strict(entry)
        logger.debug("Decoded %d entries from v%d cache", len(cache), cache.version)
        return cache

    def insert(self, entry: Entry) -> bool:
        """Add ``entry`` unless its hash is already present.

        Returns whether the entry was added; an existing entry keeps its
        position.
        """
        self._check(entry)
        if entry.hash in self._entries:
            return False
        self._entries[entry.hash] = entry
        return True

    def insert_strict(self, entry: Entry) -> None:
        """Add ``entry``, raising ``DuplicateEntryError`` if its hash is already present."""
        if not self.insert(entry):
            raise DuplicateEntryError(entry)

    def write_to(self, writer: Writer) -> None:
        """Encode the header and every entry in insertion order."""
        if not self._entries:
            raise NoEntriesFoundError()
        write_header(writer, self.header)
        for entry in self._entries.values():
            write_entry(writer, entry, self.header)

    def difference(self, other: StateCache) -> StateCache:
        """Return the entries of this cache whose hash is absent from ``other``."""
        if self.version != other.version:
            raise VersionMismatchError(self.version, other.version)
        result = StateCache(self.header)
        for entry in self._entries.values():
            if entry.hash not in other._entries:
                result._entries[entry.hash] = entry
        return result

    def hashes(self) -> list[bytes]:
        return list(self._entries)

    def get(self, digest: bytes) -> Entry | None:
        return self._entries.get(digest)

    def _check(self, entry: Entry) -> None:
        check_entry_layout(entry, self.header)
        if not entry.is_valid():
            raise HashMismatchError(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Entry):
            return item.hash in self._entries
        if isinstance(item, (bytes, bytearray)):
            return bytes(item) in self._entries
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateCache):
            return NotImplemented
        return self.header == other.header and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StateCache(version={self.version}, edition={self.edition!r}, entries={len(self)})"
