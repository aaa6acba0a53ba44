#!/usr/bin/env python3
"""
owner-du CLI: per-owner disk usage for one or more directory trees.

The report goes to stdout as tab-separated text (or a rich table with -t);
progress, notices and traversal errors go to stderr. Unreadable entries are
reported and skipped, so a report is always printed and the exit status is 0.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import DEFAULT_ROOTS, PROGRESS_INTERVAL, ScanConfig
from .diagnostics import DiagnosticSink
from .report import build_rows, render_table, write_report
from .scanner import scan

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="owner-du",
        description="Report files, hardlinks and bytes per owner for directory trees.",
    )
    parser.add_argument(
        "roots",
        metavar="ROOT",
        nargs="*",
        help="Root folder or file (default: current directory).",
    )
    parser.add_argument(
        "-a", "--apparent-size",
        action="store_true",
        help="Calculate apparent size rather than block size.",
    )
    parser.add_argument(
        "-t", "--table",
        action="store_true",
        help="Render the report as a rich table instead of tab-separated text.",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output (errors are still shown).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"owner-du {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ScanConfig:
    return ScanConfig(
        roots=list(args.roots) if args.roots else list(DEFAULT_ROOTS),
        apparent_size=args.apparent_size,
        show_progress=not args.quiet,
        table=args.table,
        verbose=args.verbose,
        progress_interval=PROGRESS_INTERVAL,
    )


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None, sink: Optional[DiagnosticSink] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    _setup_logging(config.verbose)
    logger.debug("config: %s", config)

    sink = sink if sink is not None else DiagnosticSink()
    try:
        aggregator = scan(config, sink)
    except KeyboardInterrupt:
        sink.error("Interrupted.")
        return 130

    rows = build_rows(aggregator.owners, aggregator.totals())
    if config.table:
        render_table(rows)
    else:
        write_report(rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
