"""Per-entry header used by the standard edition: stage mask plus u24 size."""

from __future__ import annotations

from dataclasses import dataclass

from dxvk_cache_tool.codec.primitives import read_u8, read_u24, write_u8, write_u24
from dxvk_cache_tool.constants.format import MAX_ENTRY_SIZE, MAX_U8
from dxvk_cache_tool.types import Reader, Writer


@dataclass(frozen=True)
class EntryHeader:
    """Stage mask and payload length preceding a standard-edition entry.

    The stage mask is an opaque bitfield and is carried through unchanged.
    """

    stage_mask: int
    entry_size: int

    def __post_init__(self) -> None:
        if not 0 <= self.stage_mask <= MAX_U8:
            raise ValueError(f"stage_mask out of range: {self.stage_mask}")
        if not 0 <= self.entry_size <= MAX_ENTRY_SIZE:
            raise ValueError(f"entry_size out of range: {self.entry_size}")

    def __repr__(self) -> str:
        return f"EntryHeader(stage_mask={self.stage_mask:#010b}, entry_size={self.entry_size})"


def read_entry_header(reader: Reader) -> EntryHeader:
    stage_mask = read_u8(reader)
    entry_size = read_u24(reader)
    return EntryHeader(stage_mask=stage_mask, entry_size=entry_size)


def write_entry_header(writer: Writer, header: EntryHeader) -> None:
    write_u8(writer, header.stage_mask)
    write_u24(writer, header.entry_size)
