"""Tests for cache file IO helpers."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO

import pytest

from dxvk_cache_tool.codec import Entry, FileHeader, StateCache
from dxvk_cache_tool.exceptions import (
    EndOfEntries,
    InvalidInputExtensionError,
    MagicMismatchError,
    NoEntriesFoundError,
    UnexpectedEofError,
)
from dxvk_cache_tool.io import (
    check_extension,
    dump_json,
    read_cache_file,
    write_binary_atomic,
    write_cache_atomic,
    write_json_atomic,
)


def test_write_cache_atomic_roundtrip(tmp_path: Path) -> None:
    cache = StateCache(FileHeader(version=8), [Entry.build(b"abc", "standard")])
    path = tmp_path / "nested" / "out.dxvk-cache"

    write_cache_atomic(path, cache)

    assert read_cache_file(path) == cache


def test_write_cache_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    path = tmp_path / "out.dxvk-cache"

    with pytest.raises(NoEntriesFoundError):
        write_cache_atomic(path, StateCache(FileHeader(version=8)))

    assert list(tmp_path.iterdir()) == []


def test_read_cache_file_tags_path(tmp_path: Path) -> None:
    path = tmp_path / "bad.dxvk-cache"
    path.write_bytes(b"ABCD" + bytes(8))

    with pytest.raises(MagicMismatchError) as exc_info:
        read_cache_file(path)

    assert exc_info.value.path == path
    assert str(path) in str(exc_info.value)


def test_read_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_cache_file(tmp_path / "missing.dxvk-cache")


@pytest.mark.parametrize("name", ["cache.bin", "cache", "cache.dxvk-cache.bak"])
def test_check_extension_rejects(tmp_path: Path, name: str) -> None:
    with pytest.raises(InvalidInputExtensionError):
        check_extension(tmp_path / name)


def test_check_extension_accepts(tmp_path: Path) -> None:
    check_extension(tmp_path / "Game.dxvk-cache")


def test_write_binary_atomic_cleans_temp_file_when_write_fails(tmp_path: Path) -> None:
    out_path = tmp_path / "out.dxvk-cache"
    out_path.write_bytes(b"previous")

    def _fail_midway(handle: BinaryIO) -> None:
        handle.write(b"partial")
        raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        write_binary_atomic(path=out_path, write=_fail_midway, temp_prefix=".tmp-", temp_suffix=".dxvk-cache")

    assert list(tmp_path.iterdir()) == [out_path]
    assert out_path.read_bytes() == b"previous"


def test_write_json_atomic_writes_sorted_json(tmp_path: Path) -> None:
    out_path = tmp_path / "reports" / "report.json"

    write_json_atomic(path=out_path, payload={"b": 1, "a": [2]}, temp_prefix=".tmp-", temp_suffix=".json")

    assert out_path.read_text(encoding="utf-8") == dump_json({"a": [2], "b": 1})
    assert [p.name for p in out_path.parent.iterdir()] == ["report.json"]


def test_read_cache_file_huge_legacy_entry_size_is_truncation(tmp_path: Path) -> None:
    path = tmp_path / "hostile.dxvk-cache"
    path.write_bytes(b"DXVK" + struct.pack("<II", 7, 0xFFFFFFF0) + b"abc")

    with pytest.raises(UnexpectedEofError) as exc_info:
        read_cache_file(path)

    assert not isinstance(exc_info.value, EndOfEntries)
    assert exc_info.value.received == 3
    assert exc_info.value.path == path
