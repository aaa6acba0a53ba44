from __future__ import annotations

"""
Human-readable byte counts for owner_du reports.

Sizes use base-1024 units with one decimal. Values below 1024 are printed as
plain integers without a suffix.
"""

_UNITS = (
    (1024 ** 4, " TB"),
    (1024 ** 3, " GB"),
    (1024 ** 2, " MB"),
    (1024, " KB"),
)


def format_size(num_bytes: int) -> str:
    """
    Format a byte count.

    Examples:
        0 -> "0"
        1023 -> "1023"
        1024 -> "1.0 KB"
        1572864 -> "1.5 MB"

    Raises:
        ValueError: if `num_bytes` is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"Byte count cannot be negative: {num_bytes}")
    for divisor, suffix in _UNITS:
        if num_bytes >= divisor:
            return f"{num_bytes / divisor:.1f}{suffix}"
    return str(int(num_bytes))
