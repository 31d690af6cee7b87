from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ProbeStatus(StrEnum):
    OK = "ok"
    UNAVAILABLE = "unavailable"


class ProbeResult(BaseModel):
    """Outcome of a single probe run.

    ``value`` is only meaningful when ``status`` is ``OK``; otherwise ``error``
    carries the reason the data source could not be read.
    """

    model_config = ConfigDict(frozen=True)

    probe: str
    status: ProbeStatus
    value: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, probe: str, value: Any) -> ProbeResult:
        return cls(probe=probe, status=ProbeStatus.OK, value=value)

    @classmethod
    def unavailable(cls, probe: str, error: str) -> ProbeResult:
        return cls(probe=probe, status=ProbeStatus.UNAVAILABLE, error=error)

    @property
    def available(self) -> bool:
        return self.status == ProbeStatus.OK

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.available else default
