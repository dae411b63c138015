"""Constants describing the DXVK state-cache file layout."""

from __future__ import annotations

import hashlib

MAGIC: bytes = b"DXVK"
HASH_SIZE: int = 20

# Versions up to and including this one use the legacy entry layout.
LEGACY_MAX_VERSION: int = 7

# sha1(b""), appended to the payload when hashing legacy entries.
SHA1_EMPTY: bytes = hashlib.sha1(b"").digest()

MAX_U8: int = 0xFF
MAX_U24: int = 0xFFFFFF
MAX_U32: int = 0xFFFFFFFF
MAX_ENTRY_SIZE: int = MAX_U24

CACHE_EXTENSION: str = ".dxvk-cache"

# Largest single read request; entry sizes come straight from the file.
READ_CHUNK_SIZE: int = 65536
