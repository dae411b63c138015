"""Decode a cache file and encode it again in canonical form."""

from __future__ import annotations

import logging
from pathlib import Path

from dxvk_cache_tool.io import write_cache_atomic
from dxvk_cache_tool.operations.common import attributed_to, load_input
from dxvk_cache_tool.operations.models import RewriteResult

logger = logging.getLogger(__name__)


def rewrite_cache(source: Path, output: Path, *, require_extension: bool = False) -> RewriteResult:
    """Rewrite ``source`` to ``output``, preserving entry order."""
    cache = load_input(source, require_extension=require_extension)
    with attributed_to(source):
        write_cache_atomic(output, cache)
    logger.info("Rewrote %d entries from %s to %s", len(cache), source, output)
    return RewriteResult(input=source, output=output, version=cache.version, entry_count=len(cache))
