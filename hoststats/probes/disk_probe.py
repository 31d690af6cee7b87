from __future__ import annotations

import asyncio
import logging

import psutil

from hoststats.probes.base import BaseProbe

logger = logging.getLogger(__name__)


class DiskProbe(BaseProbe):
    """Returns ``(total_bytes, available_bytes)`` summed over mounted volumes."""

    name = "disk"
    default = (0, 0)

    async def probe(self) -> tuple[int, int]:
        return await asyncio.to_thread(self._read_volumes)

    @staticmethod
    def _read_volumes() -> tuple[int, int]:
        total = 0
        available = 0
        for partition in psutil.disk_partitions(all=False):
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except OSError:
                # Stale mounts and permission errors
                logger.debug("Skipping unreadable mount %s", partition.mountpoint)
                continue
            total += usage.total
            available += usage.free
        return total, available
