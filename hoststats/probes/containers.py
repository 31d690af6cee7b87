from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence

from hoststats.probes.base import BaseProbe


class ContainerRuntimeError(Exception):
    """The container runtime could not be queried."""


class ContainerRuntime(ABC):
    """Anything that can report how many containers are running."""

    @abstractmethod
    async def count_running(self) -> int:
        """Return the running container count or raise ``ContainerRuntimeError``."""
        ...


class DockerCliRuntime(ContainerRuntime):
    """Counts running containers by listing their IDs with the docker CLI."""

    def __init__(
        self,
        command: Sequence[str] = ("docker", "ps", "-q"),
        timeout: float | None = 5.0,
    ) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self.command = list(command)
        self.timeout = timeout

    async def count_running(self) -> int:
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            raise ContainerRuntimeError(f"cannot run {self.command[0]}: {exc}") from exc

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), self.timeout)
        except asyncio.TimeoutError as exc:
            raise ContainerRuntimeError(
                f"{self.command[0]} did not answer within {self.timeout}s"
            ) from exc
        finally:
            # Timed out or the request was cancelled mid-query
            if proc.returncode is None:
                await self._reap(proc)

        if proc.returncode != 0:
            raise ContainerRuntimeError(f"{self.command[0]} exited with status {proc.returncode}")

        try:
            output = stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ContainerRuntimeError("unparseable container list") from exc

        return sum(1 for line in output.splitlines() if line.strip())

    @staticmethod
    async def _reap(proc: asyncio.subprocess.Process) -> None:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
        await proc.wait()


class ContainerProbe(BaseProbe):
    """Number of running containers, 0 when the runtime cannot be reached."""

    name = "containers"
    default = 0

    def __init__(self, runtime: ContainerRuntime) -> None:
        self._runtime = runtime

    async def probe(self) -> int:
        count = await self._runtime.count_running()
        if not isinstance(count, int) or count < 0:
            raise ContainerRuntimeError(f"invalid container count: {count!r}")
        return count
