#!/usr/bin/env python3
"""
owner_du.progress

Running file/byte counter shown on the diagnostic stream while scanning.
Purely observational: aggregation never depends on it.
"""

from __future__ import annotations

from .config import PROGRESS_INTERVAL, PROGRESS_PATH_WIDTH
from .diagnostics import DiagnosticSink
from .size_utils import format_size


class ProgressReporter:
    """Counts visited entries and rewrites one status line every `interval` ticks."""

    def __init__(
        self,
        sink: DiagnosticSink,
        *,
        interval: int = PROGRESS_INTERVAL,
        enabled: bool = True,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Progress interval must be positive: {interval}")
        self.sink = sink
        self.interval = interval
        self.enabled = enabled
        self.count = 0
        self.total = 0

    def tick(self, path: str, bytes_counted: int) -> None:
        self.count += 1
        self.total += bytes_counted
        if self.enabled and self.count % self.interval == 0:
            shown = str(path)[:PROGRESS_PATH_WIDTH]
            self.sink.status(
                f"{self.count} files, {format_size(self.total)}: "
                f"{shown:<{PROGRESS_PATH_WIDTH}}.."
            )

    def finalize(self) -> None:
        if not self.enabled:
            return
        # trailing blanks wipe what is left of a longer status line
        blank = " " * (PROGRESS_PATH_WIDTH + 2)
        self.sink.end_status(f"{self.count} files, {format_size(self.total)}  {blank}")
