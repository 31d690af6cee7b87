from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path

from hoststats.probes.base import BaseProbe

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


class LastUpdateProbe(BaseProbe):
    """Local time of the last package index update.

    Checks each marker path in order and formats the first one whose mtime
    can be read. The default markers are apt's success stamp followed by the
    lists directory.
    """

    name = "last_update"
    default = "Unknown"

    def __init__(self, *markers: str | Path) -> None:
        self._markers = [Path(m) for m in markers]

    async def probe(self) -> str:
        return await asyncio.to_thread(self._read_markers)

    def _read_markers(self) -> str:
        for marker in self._markers:
            try:
                mtime = marker.stat().st_mtime
            except OSError:
                continue
            return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)
        raise FileNotFoundError(
            "no update marker found: " + ", ".join(str(m) for m in self._markers)
        )
