# owner_du/scanner.py

"""
Drives a run: walks each root in turn and feeds every entry to the owner
aggregator and the progress reporter.
"""

import logging
import os
from typing import Optional

from .aggregator import OwnerAggregator
from .config import ScanConfig
from .diagnostics import DiagnosticSink
from .progress import ProgressReporter
from .walker import walk

logger = logging.getLogger(__name__)


class StatsCollector:
    """Visitor combining aggregation and progress counting."""

    def __init__(self, aggregator: OwnerAggregator, progress: ProgressReporter) -> None:
        self.aggregator = aggregator
        self.progress = progress

    def visit(self, path: str, st: os.stat_result) -> None:
        counted = self.aggregator.visit(path, st)
        self.progress.tick(path, counted)


def collect_stats(root: str, collector: StatsCollector, sink: DiagnosticSink) -> int:
    if collector.progress.enabled:
        sink.info(f"Collecting statistics for {root!r}")
    visited = walk(root, collector, sink)
    collector.progress.finalize()
    return visited


def scan(
    config: ScanConfig,
    sink: DiagnosticSink,
    aggregator: Optional[OwnerAggregator] = None,
) -> OwnerAggregator:
    """
    Walk every root in `config.roots` sequentially with one shared aggregator,
    so hardlinks are deduplicated across roots as well.
    """
    if aggregator is None:
        aggregator = OwnerAggregator(apparent_size=config.apparent_size)
    progress = ProgressReporter(
        sink,
        interval=config.progress_interval,
        enabled=config.show_progress,
    )
    collector = StatsCollector(aggregator, progress)

    for root in config.roots:
        visited = collect_stats(root, collector, sink)
        logger.debug("scan: %s -> %d entries, %d owners so far", root, visited, len(aggregator))

    return aggregator
