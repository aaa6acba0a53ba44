from __future__ import annotations

import io
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

# Make the owner_du package importable when running tests from a checkout
_ROOT_DIR = Path(__file__).resolve().parents[1]
if str(_ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(_ROOT_DIR))

from owner_du.diagnostics import DiagnosticSink  # noqa: E402


class CapturingSink(DiagnosticSink):
    """DiagnosticSink writing to an in-memory buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, no_color=True, highlight=False))

    @property
    def text(self) -> str:
        return self.buffer.getvalue()

    def lines(self) -> list:
        return [line for line in self.text.splitlines() if line.strip()]


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()


@pytest.fixture
def fake_stat():
    """Factory for stat-like objects carrying just the fields owner_du reads."""

    def _make(uid=1000, dev=1, ino=1, size=0, blocks=0, mode=0o100644):
        return SimpleNamespace(
            st_uid=uid,
            st_dev=dev,
            st_ino=ino,
            st_size=size,
            st_blocks=blocks,
            st_mode=mode,
        )

    return _make
