"""Helpers shared by the cache operations."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dxvk_cache_tool.codec import StateCache
from dxvk_cache_tool.exceptions import DxvkCacheError
from dxvk_cache_tool.io import check_extension, read_cache_file


@contextmanager
def attributed_to(path: Path) -> Iterator[None]:
    """Tag cache errors raised inside the block with the file being processed."""
    try:
        yield
    except DxvkCacheError as exc:
        if exc.path is None:
            exc.path = path
        raise


def load_input(path: Path, *, require_extension: bool = False) -> StateCache:
    """Check the input policy for ``path`` and decode it strictly."""
    if require_extension:
        check_extension(path)
    return read_cache_file(path)
