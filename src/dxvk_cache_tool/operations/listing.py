"""List entry hashes of cache files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from dxvk_cache_tool.operations.common import load_input
from dxvk_cache_tool.utils.hashes import format_hash


def list_entries(paths: Iterable[Path], *, require_extension: bool = False) -> Iterator[tuple[Path, str]]:
    """Yield ``(path, hash)`` for every entry, file by file in on-disk order.

    Each file is decoded fully before any of its hashes are yielded.
    """
    for path in paths:
        cache = load_input(path, require_extension=require_extension)
        for digest in cache.hashes():
            yield path, format_hash(digest)
