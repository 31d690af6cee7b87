from __future__ import annotations

import asyncio

import psutil

from hoststats.probes.base import BaseProbe


class TemperatureProbe(BaseProbe):
    """Representative sensor temperature in degrees Celsius.

    Walks every sensor in enumeration order and keeps the last reading that
    is present. With no readings at all the result is 0.0, which is a
    placeholder and not a measurement.
    """

    name = "temperature"
    default = 0.0

    async def probe(self) -> float:
        return await asyncio.to_thread(self._read_sensors)

    @staticmethod
    def _read_sensors() -> float:
        if not hasattr(psutil, "sensors_temperatures"):
            raise OSError("temperature sensors are not exposed on this platform")

        selected = 0.0
        for entries in psutil.sensors_temperatures().values():
            for entry in entries:
                if entry.current is not None:
                    selected = float(entry.current)
        return selected
