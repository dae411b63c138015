"""Merge several cache files into one deduplicated cache."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from dxvk_cache_tool.codec import FileHeader, StateCache, iter_entries, read_header
from dxvk_cache_tool.exceptions import EntrySizeMismatchError, NoEntriesFoundError, VersionMismatchError
from dxvk_cache_tool.io import check_extension, write_cache_atomic
from dxvk_cache_tool.operations.common import attributed_to
from dxvk_cache_tool.operations.models import MergeResult
from dxvk_cache_tool.types import Reader
from dxvk_cache_tool.utils.hashes import format_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ImportStats:
    added: int
    omitted: int
    duplicates: int


def merge_caches(
    inputs: Sequence[Path],
    output: Path,
    *,
    dry_run: bool = False,
    require_extension: bool = False,
) -> MergeResult:
    """Merge ``inputs`` in order into ``output``.

    The first input fixes the version (and, for legacy caches, the entry
    size) that every later input must match. Entries failing the hash check
    are omitted and counted; for a repeated hash the first occurrence wins.
    Nothing is written when any input fails or when ``dry_run`` is set.
    """
    expected: FileHeader | None = None
    cache: StateCache | None = None
    omitted = 0
    duplicates = 0

    for path in inputs:
        logger.info("Importing %s", path)
        with attributed_to(path):
            if require_extension:
                check_extension(path)
            with path.open("rb") as handle:
                header = read_header(handle)
                expected = accept_header(expected, header, path=path)
                if cache is None:
                    cache = StateCache(expected)
                stats = _import_entries(cache, handle, header)
        omitted += stats.omitted
        duplicates += stats.duplicates
        logger.info(
            "Imported %d new entries from %s (%d duplicate, %d invalid)",
            stats.added,
            path,
            stats.duplicates,
            stats.omitted,
        )

    if cache is None or not len(cache):
        raise NoEntriesFoundError()
    if omitted:
        logger.warning("Omitted %d entries with invalid hashes", omitted)

    if dry_run:
        logger.info("Dry run: merged cache would contain %d entries", len(cache))
    else:
        write_cache_atomic(output, cache)
        logger.info("Merged cache %s contains %d entries", output, len(cache))

    return MergeResult(
        output=output,
        inputs=tuple(inputs),
        version=cache.version,
        edition=cache.edition,
        entry_count=len(cache),
        omitted=omitted,
        duplicates=duplicates,
        written=not dry_run,
    )


def accept_header(expected: FileHeader | None, header: FileHeader, *, path: Path | None = None) -> FileHeader:
    """Set the merge header from the first input, or check a later input against it."""
    if expected is None:
        return header
    if header.version != expected.version:
        raise VersionMismatchError(expected.version, header.version, path=path)
    if expected.is_legacy and header.entry_size != expected.entry_size:
        raise EntrySizeMismatchError(expected.entry_size, header.entry_size, path=path)
    return expected


def _import_entries(cache: StateCache, reader: Reader, header: FileHeader) -> _ImportStats:
    added = omitted = duplicates = 0
    for entry in iter_entries(reader, header):
        if not entry.is_valid():
            omitted += 1
            logger.debug("Skipping entry %s: hash mismatch", format_hash(entry.hash))
            continue
        if cache.insert(entry):
            added += 1
        else:
            duplicates += 1
    return _ImportStats(added=added, omitted=omitted, duplicates=duplicates)
