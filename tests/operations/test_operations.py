"""Tests for inspect, rewrite, list-entries and difference operations."""

from __future__ import annotations

from pathlib import Path

import pytest

from dxvk_cache_tool.codec import Entry, FileHeader
from dxvk_cache_tool.exceptions import (
    DuplicateEntryError,
    HashMismatchError,
    InvalidInputExtensionError,
    NoEntriesFoundError,
    VersionMismatchError,
)
from dxvk_cache_tool.io import read_cache_file
from dxvk_cache_tool.operations import difference_caches, inspect_cache, list_entries, rewrite_cache
from dxvk_cache_tool.utils.hashes import format_hash

X = Entry.build(b"entry-x", "standard", stage_mask=0x01)
Y = Entry.build(b"entry-yy", "standard", stage_mask=0x01)
Z = Entry.build(b"entry-zzz", "standard", stage_mask=0x03)


def test_inspect_reports_version_and_count(cache_file) -> None:
    path = cache_file("a.dxvk-cache", FileHeader(version=10, entry_size=3), [X, Y, Z])

    report = inspect_cache(path)

    assert report.version == 10
    assert report.edition == "standard"
    assert report.entry_count == 3
    assert report.entry_size == 3
    assert report.data_bytes == 7 + 8 + 9
    assert report.stage_masks == {0x01: 2, 0x03: 1}


def test_inspect_legacy_has_no_stage_masks(cache_file) -> None:
    path = cache_file("l.dxvk-cache", FileHeader.for_legacy_payload(7, 4), [Entry.build(b"abcd", "legacy")])

    report = inspect_cache(path)

    assert report.edition == "legacy"
    assert report.stage_masks == {}
    assert report.to_dict()["stage_masks"] == {}


def test_inspect_is_strict_about_duplicates(cache_file) -> None:
    path = cache_file("dup.dxvk-cache", FileHeader(version=8), [X, X])

    with pytest.raises(DuplicateEntryError) as exc_info:
        inspect_cache(path)

    assert exc_info.value.path == path


def test_rewrite_is_byte_identical(cache_file, tmp_path: Path) -> None:
    source = cache_file("in.dxvk-cache", FileHeader(version=8, entry_size=42), [Z, X, Y])
    output = tmp_path / "out" / "rewritten.dxvk-cache"

    result = rewrite_cache(source, output)

    assert result.entry_count == 3
    assert output.read_bytes() == source.read_bytes()


def test_rewrite_rejects_corrupt_input(cache_file, tmp_path: Path) -> None:
    corrupt = Entry(hash=bytes(20), data=X.data, header=X.header)
    source = cache_file("in.dxvk-cache", FileHeader(version=8), [corrupt])
    output = tmp_path / "out.dxvk-cache"

    with pytest.raises(HashMismatchError):
        rewrite_cache(source, output)
    assert not output.exists()


def test_rewrite_empty_cache_fails(cache_file, tmp_path: Path) -> None:
    source = cache_file("in.dxvk-cache", FileHeader(version=8), [])

    with pytest.raises(NoEntriesFoundError):
        rewrite_cache(source, tmp_path / "out.dxvk-cache")
    assert not (tmp_path / "out.dxvk-cache").exists()


def test_list_entries_in_file_order(cache_file) -> None:
    first = cache_file("a.dxvk-cache", FileHeader(version=8), [Y, X])
    second = cache_file("b.dxvk-cache", FileHeader(version=8), [Z])

    listed = list(list_entries([first, second]))

    assert listed == [
        (first, format_hash(Y.hash)),
        (first, format_hash(X.hash)),
        (second, format_hash(Z.hash)),
    ]


def test_list_entries_extension_check(cache_file) -> None:
    path = cache_file("a.cache", FileHeader(version=8), [X])

    with pytest.raises(InvalidInputExtensionError):
        list(list_entries([path], require_extension=True))


def test_difference_lists_hashes_s6(cache_file) -> None:
    first = cache_file("a.dxvk-cache", FileHeader(version=8), [X, Y, Z])
    second = cache_file("b.dxvk-cache", FileHeader(version=8), [Y])

    result = difference_caches(first, second)

    assert result.hashes == (format_hash(X.hash), format_hash(Z.hash))
    assert result.written is False


def test_difference_writes_cache(cache_file, tmp_path: Path) -> None:
    first = cache_file("a.dxvk-cache", FileHeader(version=8, entry_size=7), [X, Y, Z])
    second = cache_file("b.dxvk-cache", FileHeader(version=8), [Y])
    output = tmp_path / "diff.dxvk-cache"

    result = difference_caches(first, second, output)

    assert result.written is True
    written = read_cache_file(output)
    assert written.header == FileHeader(version=8, entry_size=7)
    assert list(written) == [X, Z]


def test_difference_empty_result_not_written(cache_file, tmp_path: Path) -> None:
    first = cache_file("a.dxvk-cache", FileHeader(version=8), [X])
    second = cache_file("b.dxvk-cache", FileHeader(version=8), [X, Y])
    output = tmp_path / "diff.dxvk-cache"

    assert difference_caches(first, second).hashes == ()
    with pytest.raises(NoEntriesFoundError):
        difference_caches(first, second, output)
    assert not output.exists()


def test_difference_version_mismatch(cache_file) -> None:
    first = cache_file("a.dxvk-cache", FileHeader(version=8), [X])
    second = cache_file("b.dxvk-cache", FileHeader(version=9), [Y])

    with pytest.raises(VersionMismatchError) as exc_info:
        difference_caches(first, second)

    assert exc_info.value.path == second
