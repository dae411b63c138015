"""Result models returned by cache operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dxvk_cache_tool.types import Edition, JsonObject


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging several cache files into one."""

    output: Path
    inputs: tuple[Path, ...]
    version: int
    edition: Edition
    entry_count: int
    omitted: int = 0
    duplicates: int = 0
    written: bool = False


@dataclass(frozen=True)
class CacheReport:
    """Summary of a single decoded cache file."""

    path: Path
    version: int
    edition: Edition
    entry_size: int
    entry_count: int
    data_bytes: int
    stage_masks: dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> JsonObject:
        return {
            "path": str(self.path),
            "version": self.version,
            "edition": self.edition,
            "entry_size": self.entry_size,
            "entry_count": self.entry_count,
            "data_bytes": self.data_bytes,
            "stage_masks": {f"{mask:#04x}": count for mask, count in sorted(self.stage_masks.items())},
        }


@dataclass(frozen=True)
class RewriteResult:
    """Outcome of decoding a cache and encoding it again."""

    input: Path
    output: Path
    version: int
    entry_count: int


@dataclass(frozen=True)
class DifferenceResult:
    """Entries of ``first`` that ``second`` does not contain."""

    first: Path
    second: Path
    version: int
    hashes: tuple[str, ...]
    output: Path | None = None
    written: bool = False

    @property
    def entry_count(self) -> int:
        return len(self.hashes)
