#!/usr/bin/env python3
"""
owner_du.report

Final per-owner table: one row per owner sorted ascending by bytes, then a
"*" row with the grand total. The default output is tab-separated text for
piping; `render_table` draws the same rows with rich.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, TextIO, Union

from rich import box
from rich.console import Console
from rich.table import Table

from .models import GrandTotal, OwnerStats
from .owners import resolve_owner_name
from .size_utils import format_size

HEADER = ("User", "NFiles", "NLinks", "Size", "Bytes", "Frac")
TOTAL_NAME = "*"


@dataclass(frozen=True)
class ReportRow:
    name: str
    file_count: int
    link_count: int
    byte_total: int
    fraction: float

    @property
    def size(self) -> str:
        return format_size(self.byte_total)

    def cells(self) -> List[str]:
        return [
            self.name,
            str(self.file_count),
            str(self.link_count),
            self.size,
            str(self.byte_total),
            f"{self.fraction:.3f}",
        ]


def fraction(byte_total: int, grand_total: int) -> float:
    if grand_total == 0:
        return 0.0
    return byte_total / grand_total


def _row(name: str, stats: Union[OwnerStats, GrandTotal], grand_total: int) -> ReportRow:
    return ReportRow(
        name=name,
        file_count=stats.file_count,
        link_count=stats.link_count,
        byte_total=stats.byte_total,
        fraction=fraction(stats.byte_total, grand_total),
    )


def build_rows(
    owners: Mapping[int, OwnerStats],
    total: GrandTotal,
    resolve_name: Callable[[int], str] = resolve_owner_name,
) -> List[ReportRow]:
    """Owner rows ascending by byte total (ties by uid), followed by the total row."""
    ordered = sorted(owners.items(), key=lambda item: (item[1].byte_total, item[0]))
    rows = [_row(resolve_name(uid), stats, total.byte_total) for uid, stats in ordered]
    rows.append(_row(TOTAL_NAME, total, total.byte_total))
    return rows


def write_report(rows: List[ReportRow], out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    # leading blank line keeps the header off a pending progress line
    out.write("\n" + "\t".join(HEADER) + "\n")
    for row in rows:
        out.write("\t".join(row.cells()) + "\n")
    out.flush()


def make_stdout_console() -> Console:
    try:
        if sys.stdout.isatty():
            return Console()
    except Exception:
        pass
    # redirected: wide and unstyled so every column survives
    return Console(width=200, force_terminal=False, no_color=True, highlight=False, soft_wrap=False)


def render_table(rows: List[ReportRow], console: Optional[Console] = None) -> None:
    console = console if console is not None else make_stdout_console()
    table = Table(show_header=True, header_style="bold magenta", box=box.MINIMAL_DOUBLE_HEAD)
    table.add_column(HEADER[0], style="cyan", no_wrap=True)
    for heading in HEADER[1:]:
        table.add_column(heading, justify="right")

    for row in rows:
        table.add_row(*row.cells(), style="bold" if row.name == TOTAL_NAME else None)
    console.print(table)
