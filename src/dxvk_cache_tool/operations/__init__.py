"""Cache operations exposed to the command line."""

from __future__ import annotations

from .difference import difference_caches
from .inspection import inspect_cache
from .listing import list_entries
from .merge import accept_header, merge_caches
from .models import CacheReport, DifferenceResult, MergeResult, RewriteResult
from .rewrite import rewrite_cache

__all__ = [
    "CacheReport",
    "DifferenceResult",
    "MergeResult",
    "RewriteResult",
    "accept_header",
    "difference_caches",
    "inspect_cache",
    "list_entries",
    "merge_caches",
    "rewrite_cache",
]
