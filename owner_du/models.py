#!/usr/bin/env python3
from __future__ import annotations

import dataclasses
from typing import Any, Set


@dataclasses.dataclass(frozen=True)
class FileIdentity:
    """A filesystem object within one run, independent of the path used to reach it."""

    device: int
    inode: int

    @classmethod
    def from_stat(cls, st: Any) -> "FileIdentity":
        return cls(device=st.st_dev, inode=st.st_ino)


@dataclasses.dataclass
class OwnerStats:
    file_count: int = 0
    link_count: int = 0
    byte_total: int = 0
    # one entry per counted object, so len(seen) == file_count
    seen: Set[FileIdentity] = dataclasses.field(default_factory=set)


@dataclasses.dataclass(frozen=True)
class GrandTotal:
    file_count: int = 0
    link_count: int = 0
    byte_total: int = 0
