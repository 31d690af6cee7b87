"""Unit conversions for snapshot fields.

Memory and disk use a divisor of 1,000,024 bytes per megabyte. It is neither
10**6 nor 2**20, but it is what dashboards built against this service have
always displayed, so it is kept. Network counters use 2**20.
"""

from __future__ import annotations

MEMORY_DISK_DIVISOR = 1_000_024
NETWORK_DIVISOR = 1_048_576
SECONDS_PER_HOUR = 3600


def storage_mb(num_bytes: int) -> int:
    """Memory or disk bytes to reported megabytes (floor)."""
    return max(int(num_bytes), 0) // MEMORY_DISK_DIVISOR


def network_mb(num_bytes: int) -> int:
    """Network byte counter to reported megabytes (floor)."""
    return max(int(num_bytes), 0) // NETWORK_DIVISOR


def hours(seconds: float) -> int:
    return max(int(seconds), 0) // SECONDS_PER_HOUR


def percentage(part: int, whole: int) -> float:
    # total of 0 means the counters were unreadable, not an empty machine
    if whole <= 0:
        return 0.0
    return part / whole * 100.0
