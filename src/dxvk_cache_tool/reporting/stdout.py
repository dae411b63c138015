"""Human-readable stdout rendering for operation results."""

from __future__ import annotations

from dxvk_cache_tool.constants.reporting import ANSI_BOLD, ANSI_CYAN, ANSI_DIM, ANSI_GREEN, ANSI_RESET, ANSI_YELLOW
from dxvk_cache_tool.operations import CacheReport, DifferenceResult, MergeResult, RewriteResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats operation results as aligned ``label  value`` blocks."""

    def __init__(self, *, color: bool = True, verbose: bool = False) -> None:
        """Initialise the reporter."""
        self._color = color
        self._verbose = verbose

    def render_merge(self, result: MergeResult) -> str:
        verdict = "written" if result.written else "dry run, not written"
        lines = [
            self._title(f"Merged {len(result.inputs)} file(s)"),
            self._row("Output", f"{result.output} ({verdict})"),
            self._row("Version", f"v{result.version} ({result.edition})"),
            self._row("Entries", self._good(str(result.entry_count))),
        ]
        if result.omitted or self._verbose:
            lines.append(self._row("Omitted", self._warn(str(result.omitted)) if result.omitted else "0"))
        if result.duplicates or self._verbose:
            lines.append(self._row("Duplicates", str(result.duplicates)))
        return "\n".join(lines)

    def render_inspect(self, report: CacheReport) -> str:
        lines = [
            self._title(str(report.path)),
            self._row("Version", f"v{report.version} ({report.edition})"),
            self._row("Entries", self._good(str(report.entry_count))),
        ]
        if report.edition == "legacy" or self._verbose:
            lines.append(self._row("Entry size", str(report.entry_size)))
        if self._verbose:
            lines.append(self._row("Data bytes", str(report.data_bytes)))
            if report.stage_masks:
                lines.append(self._row("Stage masks", self._format_stage_masks(report.stage_masks)))
        return "\n".join(lines)

    def render_rewrite(self, result: RewriteResult) -> str:
        return "\n".join(
            [
                self._title(f"Rewrote {result.input}"),
                self._row("Output", str(result.output)),
                self._row("Version", f"v{result.version}"),
                self._row("Entries", self._good(str(result.entry_count))),
            ]
        )

    def render_difference(self, result: DifferenceResult) -> str:
        lines = [
            self._title(f"{result.first} \\ {result.second}"),
            self._row("Version", f"v{result.version}"),
            self._row("Entries", self._good(str(result.entry_count))),
        ]
        if result.output is not None:
            lines.append(self._row("Output", str(result.output)))
        return "\n".join(lines)

    def _title(self, text: str) -> str:
        return _colorize(text, ANSI_BOLD) if self._color else text

    def _row(self, label: str, value: str) -> str:
        padded = f"  {label:<12}"
        return f"{_colorize(padded, ANSI_DIM) if self._color else padded}{value}"

    def _good(self, text: str) -> str:
        return _colorize(text, ANSI_GREEN) if self._color else text

    def _warn(self, text: str) -> str:
        return _colorize(text, ANSI_YELLOW) if self._color else text

    def _format_stage_masks(self, stage_masks: dict[int, int]) -> str:
        parts = []
        for mask, count in sorted(stage_masks.items()):
            label = f"{mask:#04x}"
            parts.append(f"{_colorize(label, ANSI_CYAN) if self._color else label}×{count}")
        return " · ".join(parts)
