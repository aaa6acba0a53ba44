from __future__ import annotations

import io

from rich.console import Console

from owner_du import owners
from owner_du.models import GrandTotal, OwnerStats
from owner_du.report import HEADER, ReportRow, build_rows, fraction, render_table, write_report


def _names(uid):
    return {0: "root", 1000: "alice"}.get(uid, str(uid))


def _owners():
    return {
        1000: OwnerStats(file_count=3, link_count=1, byte_total=3072),
        0: OwnerStats(file_count=1, link_count=0, byte_total=1024),
        2000: OwnerStats(file_count=2, link_count=0, byte_total=0),
    }


def test_fraction_handles_zero_total():
    assert fraction(0, 0) == 0.0
    assert fraction(5, 0) == 0.0
    assert fraction(1, 4) == 0.25


def test_rows_sorted_ascending_with_total_last():
    total = GrandTotal(file_count=6, link_count=1, byte_total=4096)
    rows = build_rows(_owners(), total, resolve_name=_names)
    assert [r.name for r in rows] == ["2000", "root", "alice", "*"]
    assert [r.fraction for r in rows] == [0.0, 0.25, 0.75, 1.0]
    assert rows[-1] == ReportRow("*", 6, 1, 4096, 1.0)


def test_equal_byte_totals_ordered_by_uid():
    stats = {
        9: OwnerStats(file_count=1, byte_total=10),
        3: OwnerStats(file_count=1, byte_total=10),
    }
    rows = build_rows(stats, GrandTotal(2, 0, 20), resolve_name=str)
    assert [r.name for r in rows] == ["3", "9", "*"]


def test_name_resolution_called_once_per_owner():
    calls = []

    def resolver(uid):
        calls.append(uid)
        return str(uid)

    build_rows(_owners(), GrandTotal(6, 1, 4096), resolve_name=resolver)
    assert sorted(calls) == [0, 1000, 2000]


def test_write_report_tab_separated():
    rows = build_rows(_owners(), GrandTotal(6, 1, 4096), resolve_name=_names)
    out = io.StringIO()
    write_report(rows, out)
    lines = out.getvalue().split("\n")
    assert lines[0] == ""
    assert lines[1] == "User\tNFiles\tNLinks\tSize\tBytes\tFrac"
    assert lines[2] == "2000\t2\t0\t0\t0\t0.000"
    assert lines[3] == "root\t1\t0\t1.0 KB\t1024\t0.250"
    assert lines[4] == "alice\t3\t1\t3.0 KB\t3072\t0.750"
    assert lines[5] == "*\t6\t1\t4.0 KB\t4096\t1.000"
    assert lines[6] == ""


def test_empty_report_has_only_total_row():
    rows = build_rows({}, GrandTotal(), resolve_name=_names)
    out = io.StringIO()
    write_report(rows, out)
    assert out.getvalue() == "\n" + "\t".join(HEADER) + "\n*\t0\t0\t0\t0\t0.000\n"


def test_render_table_contains_rows():
    rows = build_rows(_owners(), GrandTotal(6, 1, 4096), resolve_name=_names)
    buf = io.StringIO()
    console = Console(file=buf, width=200, no_color=True, highlight=False)
    render_table(rows, console)
    text = buf.getvalue()
    for heading in HEADER:
        assert heading in text
    assert "alice" in text and "3.0 KB" in text and "0.750" in text


def test_default_resolver_falls_back_to_uid(monkeypatch):
    class NoUsers:
        @staticmethod
        def getpwuid(uid):
            raise KeyError(f"getpwuid(): uid not found: {uid}")

    monkeypatch.setattr(owners, "pwd", NoUsers)
    rows = build_rows({4242: OwnerStats(file_count=1)}, GrandTotal(1, 0, 0))
    assert rows[0].name == "4242"
