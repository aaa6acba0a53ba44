#!/usr/bin/env python3
"""
owner_du.aggregator

Owner-keyed accumulation of file counts, hardlink counts and bytes. Each owner
keeps its own set of (device, inode) identities, so an object reached through
several hardlinks is counted once and every further sighting is recorded as a
link.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .config import BLOCK_UNIT
from .models import FileIdentity, GrandTotal, OwnerStats

logger = logging.getLogger(__name__)


def allocated_size(st: Any) -> int:
    """Bytes actually allocated on disk; platforms without st_blocks report st_size."""
    blocks = getattr(st, "st_blocks", None)
    if blocks is None:
        return st.st_size
    return blocks * BLOCK_UNIT


class OwnerAggregator:
    """Maps owner id -> OwnerStats. Implements the walker's visitor interface."""

    def __init__(self, apparent_size: bool = False) -> None:
        self.apparent_size = apparent_size
        self._owners: Dict[int, OwnerStats] = {}

    def __len__(self) -> int:
        return len(self._owners)

    @property
    def owners(self) -> Mapping[int, OwnerStats]:
        return MappingProxyType(self._owners)

    def observe(
        self,
        owner_id: int,
        identity: FileIdentity,
        apparent_size: int,
        allocated_size: int,
        use_apparent: bool,
    ) -> int:
        """
        Record one sighting of `identity` for `owner_id`.

        Returns the number of bytes added to the owner's total: the selected
        size the first time the identity is seen, 0 for every further hardlink.
        """
        stats = self._owners.get(owner_id)
        if stats is None:
            logger.debug("observe: new owner %s", owner_id)
            stats = self._owners[owner_id] = OwnerStats()

        if identity in stats.seen:
            stats.link_count += 1
            return 0

        stats.seen.add(identity)
        stats.file_count += 1
        size = apparent_size if use_apparent else allocated_size
        stats.byte_total += size
        return size

    def visit(self, path: str, st: Any) -> int:
        return self.observe(
            st.st_uid,
            FileIdentity.from_stat(st),
            st.st_size,
            allocated_size(st),
            self.apparent_size,
        )

    def totals(self) -> GrandTotal:
        """Element-wise sum over all owners."""
        file_count = link_count = byte_total = 0
        for stats in self._owners.values():
            file_count += stats.file_count
            link_count += stats.link_count
            byte_total += stats.byte_total
        return GrandTotal(file_count=file_count, link_count=link_count, byte_total=byte_total)
