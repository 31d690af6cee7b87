from __future__ import annotations

from typing import TYPE_CHECKING

from hoststats.probes.base import BaseProbe

if TYPE_CHECKING:
    from hoststats.engine.system_handle import SystemHandle


class MemoryProbe(BaseProbe):
    """Returns ``(total_bytes, used_bytes)`` from the last handle refresh."""

    name = "memory"
    default = (0, 0)

    def __init__(self, handle: SystemHandle) -> None:
        self._handle = handle

    async def probe(self) -> tuple[int, int]:
        return self._handle.total_memory, self._handle.used_memory
