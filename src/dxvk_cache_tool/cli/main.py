"""CLI entrypoint for dxvk-cache-tool."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dxvk_cache_tool import __version__
from dxvk_cache_tool.config import ToolConfig, load_config
from dxvk_cache_tool.constants.branding import CLI_DESCRIPTION, TOOL_NAME
from dxvk_cache_tool.exceptions import ConfigError, DxvkCacheError
from dxvk_cache_tool.operations import (
    difference_caches,
    inspect_cache,
    list_entries,
    merge_caches,
    rewrite_cache,
)
from dxvk_cache_tool.reporting import StdoutReporter, render_inspect_json, write_inspect_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug logging and extra details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--require-extension",
        action="store_true",
        default=None,
        help="Reject input files that do not end in .dxvk-cache",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Merge state caches into one deduplicated cache")
    merge.add_argument("-o", "--output", type=Path, required=True, help="Merged cache path")
    merge.add_argument("inputs", type=Path, nargs="+", metavar="INPUT", help="Caches to merge, in priority order")
    merge.add_argument("--dry-run", action="store_true", default=None, help="Merge without writing the output")

    inspect = subparsers.add_parser("inspect", help="Show version and entry count of state caches")
    inspect.add_argument("files", type=Path, nargs="+", metavar="FILE", help="Caches to inspect")
    inspect.add_argument("--json", action="store_true", help="Print a JSON report instead of text")
    inspect.add_argument("--report", type=Path, default=None, help="Also write the JSON report to this path")

    jumble = subparsers.add_parser("jumble", help="Decode a cache and write it back out")
    jumble.add_argument("input", type=Path, metavar="INPUT", help="Cache to rewrite")
    jumble.add_argument("-o", "--output", type=Path, required=True, help="Rewritten cache path")

    list_cmd = subparsers.add_parser("list-entries", help="Print the hash of every entry")
    list_cmd.add_argument("files", type=Path, nargs="+", metavar="FILE", help="Caches to list")
    list_cmd.add_argument("--with-path", action="store_true", help="Prefix each hash with its file path")

    difference = subparsers.add_parser("difference", help="Entries in FIRST that are not in SECOND")
    difference.add_argument("first", type=Path, metavar="FIRST", help="Cache to take entries from")
    difference.add_argument("second", type=Path, metavar="SECOND", help="Cache whose entries are excluded")
    difference.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the remaining entries as a cache (hashes are printed if omitted)",
    )

    subparsers.add_parser("validate-config", help="Validate configuration without touching caches")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.logging_level, format="%(levelname)s %(message)s")
    if args.command == "validate-config":
        print("Configuration is valid.")
        return 0

    reporter = StdoutReporter(color=config.color and sys.stdout.isatty(), verbose=args.verbose)
    try:
        return _dispatch(args, config, reporter)
    except DxvkCacheError as exc:
        print(f"Error [{exc.kind}]: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error [io]: {exc}", file=sys.stderr)
        return 1


def _resolve_config(args: argparse.Namespace) -> ToolConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(args.config)
    if args.require_extension is not None:
        config = replace(config, require_extension=args.require_extension)
    if args.no_color:
        config = replace(config, color=False)
    if args.verbose:
        config = replace(config, log_level="debug")
    elif args.quiet:
        config = replace(config, log_level="warning")
    if getattr(args, "dry_run", None) is not None:
        config = replace(config, dry_run=args.dry_run)
    return config


def _dispatch(args: argparse.Namespace, config: ToolConfig, reporter: StdoutReporter) -> int:
    if args.command == "merge":
        result = merge_caches(
            args.inputs,
            args.output,
            dry_run=config.dry_run,
            require_extension=config.require_extension,
        )
        print(reporter.render_merge(result))
        return 0

    if args.command == "inspect":
        reports = [inspect_cache(path, require_extension=config.require_extension) for path in args.files]
        if args.report is not None:
            write_inspect_report(args.report, reports)
            logger.info("Wrote inspect report to %s", args.report)
        if args.json:
            print(render_inspect_json(reports))
        else:
            print("\n\n".join(reporter.render_inspect(report) for report in reports))
        return 0

    if args.command == "jumble":
        result = rewrite_cache(args.input, args.output, require_extension=config.require_extension)
        print(reporter.render_rewrite(result))
        return 0

    if args.command == "list-entries":
        for path, digest in list_entries(args.files, require_extension=config.require_extension):
            print(f"{path}\t{digest}" if args.with_path else digest)
        return 0

    if args.command == "difference":
        result = difference_caches(
            args.first,
            args.second,
            args.output,
            require_extension=config.require_extension,
        )
        if result.output is None:
            for digest in result.hashes:
                print(digest)
        else:
            print(reporter.render_difference(result))
        return 0

    raise AssertionError(f"Unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
