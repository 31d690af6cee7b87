from __future__ import annotations

import asyncio

import psutil

from hoststats.probes.base import BaseProbe


class NetworkProbe(BaseProbe):
    """Cumulative ``(received_bytes, transmitted_bytes)`` summed over all NICs."""

    name = "network"
    default = (0, 0)

    async def probe(self) -> tuple[int, int]:
        return await asyncio.to_thread(self._read_counters)

    @staticmethod
    def _read_counters() -> tuple[int, int]:
        counters = psutil.net_io_counters(pernic=True) or {}
        received = 0
        transmitted = 0
        for nic in counters.values():
            received += nic.bytes_recv
            transmitted += nic.bytes_sent
        return received, transmitted
