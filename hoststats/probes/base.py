from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from hoststats.models.probe import ProbeResult

logger = logging.getLogger(__name__)


class BaseProbe(ABC):
    """Abstract base for all metric probes.

    Subclasses implement ``probe()`` which returns the raw reading or raises.
    ``run()`` turns that into a ``ProbeResult`` and never raises, so a broken
    data source degrades to ``default`` instead of failing the snapshot.
    """

    name: str = "base"
    default: Any = None

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    async def probe(self) -> Any:
        """Read the metric from its data source."""
        ...

    # ── public ──────────────────────────────────────────

    async def run(self) -> ProbeResult:
        try:
            value = await self.probe()
        except Exception as exc:
            logger.debug("Probe [%s] unavailable: %s", self.name, exc, exc_info=True)
            return ProbeResult.unavailable(self.name, str(exc) or type(exc).__name__)
        return ProbeResult.ok(self.name, value)
