"""File header model and codec.

The header is always 12 bytes: the ``DXVK`` magic followed by two
little-endian u32 fields, ``version`` and ``entry_size``. The version picks
the edition for every entry that follows.
"""

from __future__ import annotations

from dataclasses import dataclass

from dxvk_cache_tool.codec.primitives import read_exact, read_u32, write_bytes, write_u32
from dxvk_cache_tool.constants.format import HASH_SIZE, LEGACY_MAX_VERSION, MAGIC, MAX_U32
from dxvk_cache_tool.exceptions import InvalidVersionError, MagicMismatchError
from dxvk_cache_tool.types import EDITION_LEGACY, EDITION_STANDARD, Edition, Reader, Writer


@dataclass(frozen=True)
class FileHeader:
    """Decoded state-cache file header."""

    version: int
    entry_size: int = 0
    magic: bytes = MAGIC

    def __post_init__(self) -> None:
        if self.magic != MAGIC:
            raise MagicMismatchError(self.magic)
        if self.version == 0:
            raise InvalidVersionError()
        if not 0 < self.version <= MAX_U32:
            raise ValueError(f"version out of range: {self.version}")
        if not 0 <= self.entry_size <= MAX_U32:
            raise ValueError(f"entry_size out of range: {self.entry_size}")

    @property
    def edition(self) -> Edition:
        """Entry layout used by files with this header."""
        if self.version > LEGACY_MAX_VERSION:
            return EDITION_STANDARD
        return EDITION_LEGACY

    @property
    def is_legacy(self) -> bool:
        return self.edition == EDITION_LEGACY

    @classmethod
    def for_legacy_payload(cls, version: int, data_size: int) -> FileHeader:
        """Build a legacy header whose fixed entry size fits ``data_size`` payload bytes."""
        return cls(version=version, entry_size=data_size + HASH_SIZE)


def read_header(reader: Reader) -> FileHeader:
    """Decode a file header, validating magic and version."""
    magic = read_exact(reader, len(MAGIC))
    if magic != MAGIC:
        raise MagicMismatchError(magic)
    version = read_u32(reader)
    if version == 0:
        raise InvalidVersionError()
    entry_size = read_u32(reader)
    return FileHeader(version=version, entry_size=entry_size)


def write_header(writer: Writer, header: FileHeader) -> None:
    """Encode a file header in wire order."""
    write_bytes(writer, header.magic)
    write_u32(writer, header.version)
    write_u32(writer, header.entry_size)
