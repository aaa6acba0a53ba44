#!/usr/bin/env python3
"""
owner_du.diagnostics

The secondary output channel: progress updates, per-root notices and
traversal errors. Everything goes through a rich Console bound to stderr so
the report on stdout stays clean; tests hand in a Console writing to a
StringIO instead.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)


def make_stderr_console() -> Console:
    return Console(stderr=True, highlight=False, soft_wrap=True)


class DiagnosticSink:
    """Writes diagnostic lines, keeping carriage-return status lines tidy."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else make_stderr_console()
        # True while a "\r..." status line is on screen without a newline
        self._status_pending = False

    def _break_status(self) -> None:
        if self._status_pending:
            self.console.file.write("\n")
            self._status_pending = False

    def status(self, text: str) -> None:
        """Overwrite the current line with `text` (no newline)."""
        self.console.file.write("\r" + text)
        self.console.file.flush()
        self._status_pending = True

    def end_status(self, text: str) -> None:
        """Overwrite the current line with `text` and terminate it."""
        self.console.file.write("\r" + text + "\n")
        self.console.file.flush()
        self._status_pending = False

    def info(self, message: str) -> None:
        self._break_status()
        self.console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self._break_status()
        logger.debug("diagnostic error: %s", message)
        self.console.print(message, style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)
