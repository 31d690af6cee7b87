from .aggregator import SnapshotAggregator
from .system_handle import SystemHandle

__all__ = [
    "SnapshotAggregator",
    "SystemHandle",
]
