from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import psutil

logger = logging.getLogger(__name__)


class SystemHandle:
    """Long-lived cache of CPU and memory counters.

    One instance lives for the whole process and is shared by every request.
    ``refresh_all()`` rewrites several cached fields in sequence, so callers
    hold ``lock()`` across the refresh and every read that follows it.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._cpu_percent: float = 0.0
        self._total_memory: int = 0
        self._available_memory: int = 0

        # First call only arms psutil's internal CPU times baseline.
        try:
            psutil.cpu_percent(interval=None)
        except Exception:
            logger.exception("Could not prime CPU usage counter")
        self.refresh_all()

    # ── locking ─────────────────────────────────────────

    @asynccontextmanager
    async def lock(self) -> AsyncIterator[SystemHandle]:
        async with self._lock:
            yield self

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    # ── refresh ─────────────────────────────────────────

    def refresh_all(self) -> None:
        """Re-read every cached counter from the OS.

        A counter that cannot be read keeps its previous value.
        """
        try:
            self._cpu_percent = float(psutil.cpu_percent(interval=None))
        except Exception:
            logger.exception("Failed to refresh CPU usage")

        try:
            mem = psutil.virtual_memory()
            self._total_memory = int(mem.total)
            self._available_memory = int(mem.available)
        except Exception:
            logger.exception("Failed to refresh memory counters")

    # ── cached values ───────────────────────────────────

    @property
    def cpu_percent(self) -> float:
        return self._cpu_percent

    @property
    def total_memory(self) -> int:
        return self._total_memory

    @property
    def used_memory(self) -> int:
        return max(self._total_memory - self._available_memory, 0)
