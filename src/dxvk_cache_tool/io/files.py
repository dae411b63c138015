"""Cache file access: buffered decoding, extension checks, and atomic writes."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import BinaryIO

from dxvk_cache_tool.codec import StateCache
from dxvk_cache_tool.constants.format import CACHE_EXTENSION
from dxvk_cache_tool.constants.reporting import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX
from dxvk_cache_tool.exceptions import DxvkCacheError, InvalidInputExtensionError

logger = logging.getLogger(__name__)


def check_extension(path: Path) -> None:
    """Raise ``InvalidInputExtensionError`` unless ``path`` ends in ``.dxvk-cache``."""
    if path.suffix != CACHE_EXTENSION:
        raise InvalidInputExtensionError(path.suffix or None, path=path)


def read_cache_file(path: Path) -> StateCache:
    """Decode a cache file strictly, tagging any cache error with ``path``."""
    logger.debug("Reading %s", path)
    with path.open("rb") as handle:
        try:
            return StateCache.from_stream(handle)
        except DxvkCacheError as exc:
            exc.path = exc.path or path
            raise


def write_cache_atomic(path: Path, cache: StateCache) -> None:
    """Encode ``cache`` to ``path`` through a temp file so failures leave no partial output."""
    write_binary_atomic(path=path, write=cache.write_to, temp_prefix=CACHE_TEMP_PREFIX, temp_suffix=CACHE_TEMP_SUFFIX)
    logger.debug("Wrote %d entries to %s", len(cache), path)


def write_binary_atomic(
    *,
    path: Path,
    write: Callable[[BinaryIO], None],
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist bytes atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            write(handle)
    except BaseException:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
