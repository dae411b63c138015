"""Hex rendering for 20-byte entry hashes."""

from __future__ import annotations

from dxvk_cache_tool.constants.format import HASH_SIZE


def format_hash(digest: bytes) -> str:
    """Render a hash as 40 lowercase hex characters."""
    if len(digest) != HASH_SIZE:
        raise ValueError(f"Expected a {HASH_SIZE}-byte hash, got {len(digest)} bytes")
    return digest.hex()
