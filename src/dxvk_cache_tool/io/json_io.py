"""JSON report persistence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import BinaryIO

from dxvk_cache_tool.io.files import write_binary_atomic


def dump_json(payload: object) -> str:
    """Serialize ``payload`` the way every report on disk is formatted."""
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist ``payload`` as UTF-8 JSON through a temp file in the destination directory."""
    encoded = dump_json(payload).encode("utf-8")

    def _write(handle: BinaryIO) -> None:
        handle.write(encoded)

    write_binary_atomic(path=path, write=_write, temp_prefix=temp_prefix, temp_suffix=temp_suffix)
