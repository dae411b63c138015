"""Cache entry model and codec for both editions.

Legacy entries are ``data || hash`` with a payload size fixed by the file
header. Standard entries are ``stage_mask || u24 size || hash || data``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterator
from dataclasses import dataclass, field

from dxvk_cache_tool.codec.entry_header import EntryHeader, write_entry_header
from dxvk_cache_tool.codec.header import FileHeader
from dxvk_cache_tool.codec.primitives import read_exact, read_u24, write_bytes
from dxvk_cache_tool.constants.format import HASH_SIZE, SHA1_EMPTY
from dxvk_cache_tool.exceptions import (
    EndOfEntries,
    HashMismatchError,
    MalformedEntryError,
    MalformedHeaderError,
    UnexpectedEofError,
)
from dxvk_cache_tool.types import EDITION_LEGACY, EDITION_STANDARD, Edition, Reader, Writer


def compute_hash(data: bytes, edition: Edition) -> bytes:
    """Return the integrity hash DXVK stores for ``data`` in the given edition."""
    hasher = hashlib.sha1(data)
    if edition == EDITION_LEGACY:
        hasher.update(SHA1_EMPTY)
    return hasher.digest()


@dataclass(frozen=True)
class Entry:
    """One state-cache record. ``header`` is present only in the standard edition."""

    hash: bytes
    data: bytes = field(repr=False)
    header: EntryHeader | None = None

    def __post_init__(self) -> None:
        if len(self.hash) != HASH_SIZE:
            raise ValueError(f"Entry hash must be {HASH_SIZE} bytes, got {len(self.hash)}")
        if self.header is not None and self.header.entry_size != len(self.data):
            raise MalformedEntryError(
                f"Entry header declares {self.header.entry_size} payload bytes, found {len(self.data)}"
            )

    @property
    def edition(self) -> Edition:
        return EDITION_LEGACY if self.header is None else EDITION_STANDARD

    @property
    def stage_mask(self) -> int | None:
        return None if self.header is None else self.header.stage_mask

    def expected_hash(self) -> bytes:
        return compute_hash(self.data, self.edition)

    def is_valid(self) -> bool:
        """Whether the stored hash matches the payload."""
        return self.hash == self.expected_hash()

    @classmethod
    def build(cls, data: bytes, edition: Edition, *, stage_mask: int = 0) -> Entry:
        """Create an entry with a correct hash for ``data``."""
        data = bytes(data)
        header = None if edition == EDITION_LEGACY else EntryHeader(stage_mask=stage_mask, entry_size=len(data))
        return cls(hash=compute_hash(data, edition), data=data, header=header)


def check_entry_layout(entry: Entry, header: FileHeader) -> None:
    """Raise ``MalformedEntryError`` unless ``entry`` can be stored in a file with ``header``."""
    if entry.edition != header.edition:
        raise MalformedEntryError(
            f"Cannot store a {entry.edition} entry in a {header.edition} cache (v{header.version})"
        )
    if header.is_legacy and len(entry.data) + HASH_SIZE != header.entry_size:
        raise MalformedEntryError(
            f"Legacy entry payload is {len(entry.data)} bytes, file expects {header.entry_size - HASH_SIZE}"
        )


def read_entry(reader: Reader, header: FileHeader, *, verify: bool = True) -> Entry:
    """Decode the next entry.

    Raises ``EndOfEntries`` when the stream is exhausted exactly at the entry
    boundary and ``UnexpectedEofError`` when it ends partway through an entry.
    With ``verify`` the entry hash is checked and ``HashMismatchError`` raised
    on mismatch.
    """
    if header.is_legacy:
        entry = _read_legacy(reader, header.entry_size)
    else:
        entry = _read_standard(reader)
    if verify and not entry.is_valid():
        raise HashMismatchError(entry)
    return entry


def iter_entries(reader: Reader, header: FileHeader) -> Iterator[Entry]:
    """Yield unverified entries until the stream ends on an entry boundary."""
    while True:
        try:
            entry = read_entry(reader, header, verify=False)
        except EndOfEntries:
            return
        yield entry


def write_entry(writer: Writer, entry: Entry, header: FileHeader) -> None:
    """Encode ``entry`` using the layout of the file described by ``header``."""
    check_entry_layout(entry, header)
    if entry.header is None:
        write_bytes(writer, entry.data)
        write_bytes(writer, entry.hash)
        return
    write_entry_header(writer, entry.header)
    write_bytes(writer, entry.hash)
    write_bytes(writer, entry.data)


def _read_legacy(reader: Reader, entry_size: int) -> Entry:
    if entry_size < HASH_SIZE:
        if not reader.read(1):
            raise EndOfEntries(HASH_SIZE)
        raise MalformedHeaderError(f"Legacy entry size {entry_size} is smaller than the {HASH_SIZE}-byte hash")
    raw = _read_entry_start(reader, entry_size)
    data_size = entry_size - HASH_SIZE
    return Entry(hash=raw[data_size:], data=raw[:data_size])


def _read_standard(reader: Reader) -> Entry:
    # Only the stage-mask byte may be missing at a clean end of file.
    stage_mask = _read_entry_start(reader, 1)[0]
    entry_header = EntryHeader(stage_mask=stage_mask, entry_size=read_u24(reader))
    hash_ = read_exact(reader, HASH_SIZE)
    data = read_exact(reader, entry_header.entry_size)
    return Entry(hash=hash_, data=data, header=entry_header)


def _read_entry_start(reader: Reader, size: int) -> bytes:
    try:
        return read_exact(reader, size)
    except UnexpectedEofError as exc:
        if exc.received == 0:
            raise EndOfEntries(size) from None
        raise
