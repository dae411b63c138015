"""Tests for the 12-byte file header codec."""

from __future__ import annotations

import io

import pytest

from dxvk_cache_tool.codec import FileHeader, read_header, write_header
from dxvk_cache_tool.exceptions import InvalidVersionError, MagicMismatchError, UnexpectedEofError


def test_header_wire_layout() -> None:
    buf = io.BytesIO()
    write_header(buf, FileHeader(version=8, entry_size=0x11223344))

    assert buf.getvalue() == b"DXVK" + b"\x08\x00\x00\x00" + b"\x44\x33\x22\x11"


def test_header_roundtrip() -> None:
    header = FileHeader(version=10, entry_size=1234)
    buf = io.BytesIO()
    write_header(buf, header)

    assert read_header(io.BytesIO(buf.getvalue())) == header


def test_bad_magic_rejected() -> None:
    with pytest.raises(MagicMismatchError) as exc_info:
        read_header(io.BytesIO(b"DXVX\x08\x00\x00\x00\x00\x00\x00\x00"))

    assert exc_info.value.found == b"DXVX"


def test_zero_version_rejected() -> None:
    with pytest.raises(InvalidVersionError):
        read_header(io.BytesIO(b"DXVK\x00\x00\x00\x00\x00\x00\x00\x00"))


def test_truncated_header_raises_eof() -> None:
    with pytest.raises(UnexpectedEofError):
        read_header(io.BytesIO(b"DXVK\x08\x00"))


def test_zero_version_rejected_on_construction() -> None:
    with pytest.raises(InvalidVersionError):
        FileHeader(version=0)


@pytest.mark.parametrize(("version", "edition"), [(1, "legacy"), (7, "legacy"), (8, "standard"), (15, "standard")])
def test_edition_boundary(version: int, edition: str) -> None:
    assert FileHeader(version=version).edition == edition


def test_for_legacy_payload_adds_hash_size() -> None:
    header = FileHeader.for_legacy_payload(7, 4)

    assert header.entry_size == 24
    assert header.is_legacy
