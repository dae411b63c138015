"""Shared pytest fixtures for building state-cache files."""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

import pytest

from dxvk_cache_tool.codec import Entry, FileHeader, write_entry, write_header

CacheBytesBuilder: TypeAlias = Callable[[FileHeader, Sequence[Entry]], bytes]
CacheFileBuilder: TypeAlias = Callable[..., Path]


def encode_cache(header: FileHeader, entries: Sequence[Entry]) -> bytes:
    """Encode entries without container checks so tests can craft corrupt files."""
    buf = io.BytesIO()
    write_header(buf, header)
    for entry in entries:
        write_entry(buf, entry, header)
    return buf.getvalue()


@pytest.fixture()
def cache_bytes() -> CacheBytesBuilder:
    """Return the raw cache encoder."""
    return encode_cache


@pytest.fixture()
def cache_file(tmp_path: Path) -> CacheFileBuilder:
    """Return a factory writing ``entries`` under ``tmp_path`` and returning the file path."""

    def _write(name: str, header: FileHeader, entries: Sequence[Entry]) -> Path:
        path = tmp_path / name
        path.write_bytes(encode_cache(header, entries))
        return path

    return _write


@pytest.fixture()
def standard_header() -> FileHeader:
    return FileHeader(version=8, entry_size=0)


@pytest.fixture()
def legacy_header() -> FileHeader:
    return FileHeader.for_legacy_payload(7, 4)
