from .base import BaseProbe
from .containers import ContainerProbe, ContainerRuntime, ContainerRuntimeError, DockerCliRuntime
from .cpu_probe import CpuProbe
from .disk_probe import DiskProbe
from .host_probe import HostProbe
from .last_update_probe import LastUpdateProbe
from .memory_probe import MemoryProbe
from .network_probe import NetworkProbe
from .temperature_probe import TemperatureProbe
from .uptime_probe import UptimeProbe

__all__ = [
    "BaseProbe",
    "ContainerProbe",
    "ContainerRuntime",
    "ContainerRuntimeError",
    "CpuProbe",
    "DiskProbe",
    "DockerCliRuntime",
    "HostProbe",
    "LastUpdateProbe",
    "MemoryProbe",
    "NetworkProbe",
    "TemperatureProbe",
    "UptimeProbe",
]
