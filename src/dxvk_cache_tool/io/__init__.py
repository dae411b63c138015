"""Shared file I/O helpers."""

from .files import check_extension, read_cache_file, write_binary_atomic, write_cache_atomic
from .json_io import dump_json, write_json_atomic

__all__ = [
    "check_extension",
    "dump_json",
    "read_cache_file",
    "write_binary_atomic",
    "write_cache_atomic",
    "write_json_atomic",
]
