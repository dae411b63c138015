"""Reader and writer for DXVK state-cache files."""

from __future__ import annotations

from .cache import StateCache
from .entry import Entry, check_entry_layout, compute_hash, iter_entries, read_entry, write_entry
from .entry_header import EntryHeader, read_entry_header, write_entry_header
from .header import FileHeader, read_header, write_header

__all__ = [
    "Entry",
    "EntryHeader",
    "FileHeader",
    "StateCache",
    "check_entry_layout",
    "compute_hash",
    "iter_entries",
    "read_entry",
    "read_entry_header",
    "read_header",
    "write_entry",
    "write_entry_header",
    "write_header",
]
