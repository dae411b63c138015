"""Cross-module type aliases."""

from __future__ import annotations

from typing import BinaryIO, Literal, TypeAlias

Edition: TypeAlias = Literal["standard", "legacy"]
LogLevel: TypeAlias = Literal["debug", "info", "warning", "error"]

Reader: TypeAlias = BinaryIO
Writer: TypeAlias = BinaryIO

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

EDITION_STANDARD: Edition = "standard"
EDITION_LEGACY: Edition = "legacy"
