"""Summarize the contents of a cache file."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from dxvk_cache_tool.operations.common import load_input
from dxvk_cache_tool.operations.models import CacheReport

logger = logging.getLogger(__name__)


def inspect_cache(path: Path, *, require_extension: bool = False) -> CacheReport:
    """Decode ``path`` fully and report its header and entry statistics."""
    cache = load_input(path, require_extension=require_extension)
    stage_masks = Counter(entry.stage_mask for entry in cache if entry.stage_mask is not None)
    report = CacheReport(
        path=path,
        version=cache.version,
        edition=cache.edition,
        entry_size=cache.header.entry_size,
        entry_count=len(cache),
        data_bytes=sum(len(entry.data) for entry in cache),
        stage_masks=dict(stage_masks),
    )
    logger.debug("Inspected %s: v%d, %d entries", path, report.version, report.entry_count)
    return report
