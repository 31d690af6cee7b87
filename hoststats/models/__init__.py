from .probe import ProbeResult, ProbeStatus
from .snapshot import Snapshot

__all__ = [
    "ProbeResult",
    "ProbeStatus",
    "Snapshot",
]
