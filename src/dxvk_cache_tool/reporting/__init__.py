"""Output rendering for operation results."""

from .json_report import build_inspect_payload, render_inspect_json, write_inspect_report
from .stdout import StdoutReporter

__all__ = ["StdoutReporter", "build_inspect_payload", "render_inspect_json", "write_inspect_report"]
