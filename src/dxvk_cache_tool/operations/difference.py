"""Compute the entries one cache has that another lacks."""

from __future__ import annotations

import logging
from pathlib import Path

from dxvk_cache_tool.exceptions import NoEntriesFoundError
from dxvk_cache_tool.io import write_cache_atomic
from dxvk_cache_tool.operations.common import attributed_to, load_input
from dxvk_cache_tool.operations.models import DifferenceResult
from dxvk_cache_tool.utils.hashes import format_hash

logger = logging.getLogger(__name__)


def difference_caches(
    first: Path,
    second: Path,
    output: Path | None = None,
    *,
    require_extension: bool = False,
) -> DifferenceResult:
    """Return entries of ``first`` missing from ``second``, writing them to ``output`` if given."""
    minuend = load_input(first, require_extension=require_extension)
    subtrahend = load_input(second, require_extension=require_extension)
    with attributed_to(second):
        remaining = minuend.difference(subtrahend)
    logger.info("%d of %d entries in %s are not in %s", len(remaining), len(minuend), first, second)

    if output is not None:
        if not len(remaining):
            raise NoEntriesFoundError(path=output)
        write_cache_atomic(output, remaining)
        logger.info("Wrote difference cache %s", output)

    return DifferenceResult(
        first=first,
        second=second,
        version=remaining.version,
        hashes=tuple(format_hash(digest) for digest in remaining.hashes()),
        output=output,
        written=output is not None,
    )
