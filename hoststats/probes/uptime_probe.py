from __future__ import annotations

import asyncio
import time

import psutil

from hoststats.probes.base import BaseProbe


class UptimeProbe(BaseProbe):
    """Whole seconds since boot."""

    name = "uptime"
    default = 0

    async def probe(self) -> int:
        boot_time = await asyncio.to_thread(psutil.boot_time)
        return max(int(time.time() - boot_time), 0)
