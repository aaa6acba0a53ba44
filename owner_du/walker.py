#!/usr/bin/env python3
"""
owner_du.walker

Depth-first traversal over one root path. Metadata is always read with
lstat, so symlinks are visited as entries of their own and never followed;
without followed links the tree has no cycles.

The walk keeps an explicit stack instead of recursing, so very deep trees do
not exhaust the interpreter's call stack. Order is the same as the recursive
form: a directory is visited before its children, and children are walked in
the order the listing yields them.

Failures are non-fatal. An entry whose metadata cannot be read is reported
and skipped. A directory that cannot be listed is reported and its subtree
abandoned; if the listing fails part-way, the records read so far are still
walked.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import Any, List, Protocol, Union

from .diagnostics import DiagnosticSink

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class EntryVisitor(Protocol):
    def visit(self, path: str, st: os.stat_result) -> Any:
        ...


def _list_children(path: str, sink: DiagnosticSink) -> List[str]:
    children: List[str] = []
    try:
        listing = os.scandir(path)
    except OSError as exc:
        sink.error(f"Error reading directory {path!r}: {exc}")
        return children

    with listing:
        try:
            for entry in listing:
                children.append(entry.path)
        except OSError as exc:
            sink.error(f"Error reading file record in {path!r}: {exc}")
    return children


def walk(root: PathLike, visitor: EntryVisitor, sink: DiagnosticSink) -> int:
    """
    Visit `root` and everything below it. Returns the number of entries visited.
    """
    root = os.fspath(root)
    logger.debug("walk: root=%s", root)

    visited = 0
    stack: List[str] = [root]
    while stack:
        path = stack.pop()
        try:
            st = os.lstat(path)
        except OSError as exc:
            sink.error(f"Error retrieving metadata for {path!r}: {exc}")
            continue

        visitor.visit(path, st)
        visited += 1

        # lstat reports a symlink as S_IFLNK, never as a directory
        if stat.S_ISDIR(st.st_mode):
            children = _list_children(path, sink)
            stack.extend(reversed(children))

    logger.debug("walk: root=%s visited=%d", root, visited)
    return visited
