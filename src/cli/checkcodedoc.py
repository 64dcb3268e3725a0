# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line entry point for the documentation coverage check."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Literal, TextIO

from rich.console import Console
from rich.logging import RichHandler

from ccd.config import REPORTERS, CheckConfig, ConfigError, load_options_file
from ccd.discovery import DEFAULT_EXTENSIONS, DiscoveryError, discover_files
from ccd.model import RunSummary
from ccd.report import summarize, summary_lines, write_report
from ccd.scanner import scan_files

logger = logging.getLogger(__name__)

FailOn = Literal["never", "error", "warning"]


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="checkcodedoc",
        description="Check that functions carry doc blocks matching their signatures.",
    )
    parser.add_argument(
        "targets",
        nargs="+",
        help="Files, directories or glob patterns (relative to --root) to check.",
    )
    parser.add_argument("--root", default=".", help="Base directory for targets.")
    parser.add_argument("--config", required=False, help="JSON options file.")
    parser.add_argument("--reporter", choices=REPORTERS, default=None, help="Report format.")
    parser.add_argument(
        "--reporter-output", default=None, help="File the report is written to."
    )
    parser.add_argument(
        "--param-doc-pattern",
        default=None,
        help="Regex with two groups (type, description) for parameter tags.",
    )
    parser.add_argument(
        "--short-doc-warnings",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Warn about one-line descriptions.",
    )
    parser.add_argument(
        "--strict-types",
        dest="enforce_strict_types",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Warn about parameter types outside the allowed set.",
    )
    parser.add_argument(
        "--extension",
        dest="extensions",
        action="append",
        default=None,
        help="File suffix collected from directory targets (repeatable).",
    )
    parser.add_argument(
        "--no-gitignore",
        dest="respect_gitignore",
        action="store_false",
        help="Do not skip files ignored by the root .gitignore.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not echo the report to stdout.",
    )
    parser.add_argument(
        "--fail-on",
        choices=("never", "error", "warning"),
        default="never",
        help="Exit with status 1 when findings of this severity or worse exist.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the documentation check.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2

    try:
        config = build_config(args)
    except ConfigError as exc:
        logger.warning(f"Invalid configuration (error={exc})")
        stderr.write(f"Invalid configuration: {exc}\n")
        return 2

    extensions = tuple(args.extensions) if args.extensions else DEFAULT_EXTENSIONS
    try:
        paths = discover_files(
            targets=args.targets,
            root=Path(args.root),
            extensions=extensions,
            respect_gitignore=args.respect_gitignore,
        )
    except DiscoveryError as exc:
        logger.warning(f"File discovery failed (root={args.root} error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    result = scan_files(paths, config)
    summary = summarize(result.reports, result.files_scanned)
    logger.info(
        f"Documentation check completed (files={summary.files_scanned} findings={summary.finding_count})"
    )

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for line in summary_lines(summary):
        console.print(line, markup=False, highlight=False)
    try:
        write_report(result.reports, summary, config, console)
    except OSError as exc:
        logger.warning(
            f"Failed to write report (output_path={config.reporter_output} error={exc})"
        )
        stderr.write(f"Failed to write report: {config.reporter_output}\n")
        return 2

    return exit_code_for(summary, args.fail_on)


def build_config(args: argparse.Namespace) -> CheckConfig:
    """Merge defaults, the options file and CLI flags.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Configuration for this run.

    Raises:
        ConfigError: If the options file or any option value is invalid.
    """
    config = CheckConfig()
    if args.config:
        config = CheckConfig.from_options(load_options_file(Path(args.config)), base=config)
    flags: dict[str, Any] = {
        "param_doc_pattern": args.param_doc_pattern,
        "short_doc_warnings": args.short_doc_warnings,
        "enforce_strict_types": args.enforce_strict_types,
        "reporter": args.reporter,
        "reporter_output": args.reporter_output,
        "verbose": False if args.quiet else None,
    }
    return CheckConfig.from_options(flags, base=config)


def exit_code_for(summary: RunSummary, fail_on: FailOn) -> int:
    """Map run totals to an exit code.

    Args:
        summary: Run totals.
        fail_on: Lowest severity that fails the run.

    Returns:
        ``1`` when the threshold is met, ``0`` otherwise.
    """
    if fail_on == "error" and summary.error_count:
        return 1
    if fail_on == "warning" and summary.finding_count:
        return 1
    return 0


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
