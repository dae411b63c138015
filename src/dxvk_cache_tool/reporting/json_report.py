"""JSON report for ``inspect --json``."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from dxvk_cache_tool.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX, SCHEMA_VERSION
from dxvk_cache_tool.io import dump_json, write_json_atomic
from dxvk_cache_tool.operations import CacheReport
from dxvk_cache_tool.types import JsonObject


def build_inspect_payload(reports: Sequence[CacheReport]) -> JsonObject:
    """Return the JSON document describing ``reports``."""
    return {
        "schema_version": SCHEMA_VERSION,
        "caches": [report.to_dict() for report in reports],
    }


def render_inspect_json(reports: Sequence[CacheReport]) -> str:
    return dump_json(build_inspect_payload(reports)).rstrip("\n")


def write_inspect_report(path: Path, reports: Sequence[CacheReport]) -> Path:
    """Write the inspect report atomically and return its path."""
    write_json_atomic(
        path=path,
        payload=build_inspect_payload(reports),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
