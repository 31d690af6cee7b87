from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Snapshot(BaseModel):
    """Point-in-time view of host health, as served by ``/api/stats``.

    Memory and disk figures are megabytes (bytes // 1,000,024), network
    figures are megabytes (bytes // 1,048,576), uptime is whole hours.
    """

    model_config = ConfigDict(frozen=True)

    host: str = "Unknown"
    os: str = "Unknown Unknown"
    total_memory: int = Field(default=0, ge=0)
    used_memory: int = Field(default=0, ge=0)
    mempercentage: float = 0.0
    cpu_usage: float = 0.0
    temp: float = 0.0
    received: int = Field(default=0, ge=0)
    transmitted: int = Field(default=0, ge=0)
    total_disk: int = Field(default=0, ge=0)
    used_disk: int = Field(default=0, ge=0)
    free_disk: int = Field(default=0, ge=0)
    uptime_hours: int = Field(default=0, ge=0)
    docker_containers: int = Field(default=0, ge=0)
    last_update: str = "Unknown"
