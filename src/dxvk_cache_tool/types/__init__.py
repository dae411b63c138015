"""Shared type aliases for dxvk-cache-tool."""

from .common import (
    EDITION_LEGACY,
    EDITION_STANDARD,
    Edition,
    JsonObject,
    JsonScalar,
    JsonValue,
    LogLevel,
    Reader,
    Writer,
)

__all__ = [
    "EDITION_LEGACY",
    "EDITION_STANDARD",
    "Edition",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "LogLevel",
    "Reader",
    "Writer",
]
