from __future__ import annotations

import asyncio
import logging

from hoststats.config import Settings, settings as default_settings
from hoststats.engine.system_handle import SystemHandle
from hoststats.models import ProbeResult, Snapshot
from hoststats.probes import (
    BaseProbe,
    ContainerProbe,
    ContainerRuntime,
    CpuProbe,
    DiskProbe,
    DockerCliRuntime,
    HostProbe,
    LastUpdateProbe,
    MemoryProbe,
    NetworkProbe,
    TemperatureProbe,
    UptimeProbe,
)
from hoststats.units import hours, network_mb, percentage, storage_mb

logger = logging.getLogger(__name__)


class SnapshotAggregator:
    """Builds one consistent ``Snapshot`` per call from every probe.

    Holds the shared ``SystemHandle`` for the whole refresh-and-probe cycle,
    so concurrent callers queue rather than interleave refreshes.
    """

    def __init__(
        self,
        handle: SystemHandle,
        container_runtime: ContainerRuntime | None = None,
        settings: Settings | None = None,
    ) -> None:
        cfg = settings or default_settings
        self.handle = handle
        if container_runtime is None:
            container_runtime = DockerCliRuntime(
                cfg.docker_command, timeout=cfg.container_query_timeout
            )

        self.probes: dict[str, BaseProbe] = {
            p.name: p
            for p in (
                HostProbe(),
                CpuProbe(handle),
                MemoryProbe(handle),
                NetworkProbe(),
                TemperatureProbe(),
                DiskProbe(),
                UptimeProbe(),
                ContainerProbe(container_runtime),
                LastUpdateProbe(cfg.update_stamp_file, cfg.update_lists_dir),
            )
        }

    async def run_probes(self) -> dict[str, ProbeResult]:
        """Run every probe concurrently. Caller must hold the handle lock."""
        results = await asyncio.gather(*(p.run() for p in self.probes.values()))
        return {r.probe: r for r in results}

    async def build_snapshot(self) -> Snapshot:
        async with self.handle.lock():
            self.handle.refresh_all()
            results = await self.run_probes()
            snapshot = self._assemble(results)

        missing = [name for name, r in results.items() if not r.available]
        if missing:
            logger.debug("Snapshot built with unavailable probes: %s", ", ".join(missing))
        return snapshot

    def _value(self, results: dict[str, ProbeResult], name: str):
        return results[name].unwrap_or(self.probes[name].default)

    def _assemble(self, results: dict[str, ProbeResult]) -> Snapshot:
        host, os_name = self._value(results, "host")
        mem_total, mem_used = self._value(results, "memory")
        received, transmitted = self._value(results, "network")
        disk_total, disk_available = self._value(results, "disk")
        # available can momentarily exceed total between the two reads
        disk_used = max(disk_total - disk_available, 0)

        return Snapshot(
            host=host,
            os=os_name,
            total_memory=storage_mb(mem_total),
            used_memory=storage_mb(mem_used),
            mempercentage=percentage(mem_used, mem_total),
            cpu_usage=self._value(results, "cpu"),
            temp=self._value(results, "temperature"),
            received=network_mb(received),
            transmitted=network_mb(transmitted),
            total_disk=storage_mb(disk_total),
            used_disk=storage_mb(disk_used),
            free_disk=storage_mb(disk_available),
            uptime_hours=hours(self._value(results, "uptime")),
            docker_containers=self._value(results, "containers"),
            last_update=self._value(results, "last_update"),
        )
