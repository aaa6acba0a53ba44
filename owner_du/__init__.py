#!/usr/bin/env python3
"""
owner_du package

Per-owner disk usage: distinct files, extra hardlinks and bytes per uid.
"""

__all__ = [
    "aggregator",
    "cli",
    "config",
    "diagnostics",
    "models",
    "owners",
    "progress",
    "report",
    "scanner",
    "size_utils",
    "walker",
]

__version__ = "0.1.0"
