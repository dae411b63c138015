"""Little-endian integer and fixed-size block helpers for binary streams."""

from __future__ import annotations

import struct

from dxvk_cache_tool.constants.format import MAX_U8, MAX_U24, MAX_U32, READ_CHUNK_SIZE
from dxvk_cache_tool.exceptions import UnexpectedEofError
from dxvk_cache_tool.types import Reader, Writer

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")


def read_exact(reader: Reader, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising ``UnexpectedEofError`` on a short stream."""
    if size < 0:
        raise ValueError(f"Cannot read a negative number of bytes: {size}")
    chunks: list[bytes] = []
    remaining = size
    while remaining:
        chunk = reader.read(min(remaining, READ_CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != size:
        raise UnexpectedEofError(size, len(data))
    return data


def read_u8(reader: Reader) -> int:
    return _U8.unpack(read_exact(reader, 1))[0]


def read_u24(reader: Reader) -> int:
    # Three bytes, low byte first, no padding on the wire.
    return _U32.unpack(read_exact(reader, 3) + b"\x00")[0]


def read_u32(reader: Reader) -> int:
    return _U32.unpack(read_exact(reader, 4))[0]


def write_bytes(writer: Writer, data: bytes) -> None:
    """Write a whole block, looping over partial writes from raw streams."""
    view = memoryview(data)
    while view:
        written = writer.write(view)
        if written is None:
            # Non-blocking raw streams report "would block" this way.
            raise BlockingIOError("Stream is not ready for writing")
        view = view[written:]


def write_u8(writer: Writer, value: int) -> None:
    _check_range(value, MAX_U8, "u8")
    write_bytes(writer, _U8.pack(value))


def write_u24(writer: Writer, value: int) -> None:
    _check_range(value, MAX_U24, "u24")
    write_bytes(writer, _U32.pack(value)[:3])


def write_u32(writer: Writer, value: int) -> None:
    _check_range(value, MAX_U32, "u32")
    write_bytes(writer, _U32.pack(value))


def _check_range(value: int, maximum: int, label: str) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{label} value out of range: {value}")
