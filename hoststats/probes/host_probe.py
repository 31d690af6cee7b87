from __future__ import annotations

import asyncio
import platform
import socket

from hoststats.probes.base import BaseProbe

UNKNOWN = "Unknown"


class HostProbe(BaseProbe):
    """Returns ``(host_name, os_description)``.

    The OS description is ``"<name> <version>"``, taken from os-release where
    the platform has one (e.g. ``"Ubuntu 22.04"``) and from ``platform``
    otherwise. Any part that cannot be determined reads ``"Unknown"``.
    """

    name = "host"
    default = (UNKNOWN, f"{UNKNOWN} {UNKNOWN}")

    async def probe(self) -> tuple[str, str]:
        return await asyncio.to_thread(self._read_identity)

    @classmethod
    def _read_identity(cls) -> tuple[str, str]:
        os_name, os_version = cls._os_identity()
        return cls._host_name(), f"{os_name} {os_version}"

    @staticmethod
    def _host_name() -> str:
        try:
            return socket.gethostname() or UNKNOWN
        except OSError:
            return UNKNOWN

    @staticmethod
    def _os_identity() -> tuple[str, str]:
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            release = {}

        name = release.get("NAME") or platform.system()
        version = release.get("VERSION_ID") or platform.release()
        return name or UNKNOWN, version or UNKNOWN
