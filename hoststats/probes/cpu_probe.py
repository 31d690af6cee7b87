from __future__ import annotations

from typing import TYPE_CHECKING

from hoststats.probes.base import BaseProbe

if TYPE_CHECKING:
    from hoststats.engine.system_handle import SystemHandle


class CpuProbe(BaseProbe):
    """Global CPU utilization from the last handle refresh (0-100, unclamped)."""

    name = "cpu"
    default = 0.0

    def __init__(self, handle: SystemHandle) -> None:
        self._handle = handle

    async def probe(self) -> float:
        return self._handle.cpu_percent
