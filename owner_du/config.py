# owner_du/config.py

"""
Default configuration values for owner_du.

The progress interval may be overridden with OWNER_DU_PROGRESS_INTERVAL.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_ROOTS = ["."]
BLOCK_UNIT = 512                  # st_blocks are always 512-byte units
DEFAULT_PROGRESS_INTERVAL = 10000
PROGRESS_PATH_WIDTH = 78
PROGRESS_INTERVAL_ENV = "OWNER_DU_PROGRESS_INTERVAL"


def progress_interval_from_env(default: int = DEFAULT_PROGRESS_INTERVAL) -> int:
    """Read the progress interval from the environment, falling back to `default`."""
    raw = os.environ.get(PROGRESS_INTERVAL_ENV, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", PROGRESS_INTERVAL_ENV, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", PROGRESS_INTERVAL_ENV, raw)
        return default
    return value


PROGRESS_INTERVAL = progress_interval_from_env()


@dataclass
class ScanConfig:
    roots: List[str] = field(default_factory=lambda: list(DEFAULT_ROOTS))
    apparent_size: bool = False
    show_progress: bool = True
    table: bool = False
    verbose: bool = False
    progress_interval: int = PROGRESS_INTERVAL
