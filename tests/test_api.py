"""Tests for hoststats.api routes."""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from hoststats.main import app
from hoststats.models import Snapshot
from hoststats.probes import BaseProbe


# ── fixtures ───────────────────────────────────────────


class FakeAggregator:
    """Stands in for SnapshotAggregator without touching the host."""

    def __init__(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.calls = 0

    async def build_snapshot(self) -> Snapshot:
        self.calls += 1
        await asyncio.sleep(0)
        return self.snapshot


@pytest.fixture
def fake_aggregator():
    return FakeAggregator(
        Snapshot(
            host="box",
            os="Ubuntu 22.04",
            total_memory=15999,
            used_memory=7999,
            mempercentage=50.0,
            cpu_usage=12.5,
            temp=48.0,
            received=5,
            transmitted=3,
            total_disk=100,
            used_disk=60,
            free_disk=40,
            uptime_hours=7,
            docker_containers=3,
            last_update="2024-03-01 09:30",
        )
    )


@pytest.fixture
def _setup_app_state(fake_aggregator):
    """Inject app.state so routes work without full lifespan."""
    app.state.aggregator = fake_aggregator
    yield
    del app.state.aggregator


@pytest.fixture
async def client(_setup_app_state):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ── REST tests ─────────────────────────────────────────


class TestStats:
    @pytest.mark.asyncio
    async def test_stats_ok(self, client: AsyncClient):
        resp = await client.get("/api/stats")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        data = resp.json()
        assert data["host"] == "box"
        assert data["mempercentage"] == 50.0
        assert data["docker_containers"] == 3

    @pytest.mark.asyncio
    async def test_exact_field_set_and_types(self, client: AsyncClient):
        data = (await client.get("/api/stats")).json()
        assert set(data) == set(Snapshot.model_fields)
        for key in ("host", "os", "last_update"):
            assert isinstance(data[key], str)
        for key in ("mempercentage", "cpu_usage", "temp"):
            assert isinstance(data[key], float)
        for key in ("total_memory", "used_memory", "received", "transmitted", "total_disk",
                    "used_disk", "free_disk", "uptime_hours", "docker_containers"):
            assert isinstance(data[key], int) and data[key] >= 0

    @pytest.mark.asyncio
    async def test_fresh_snapshot_per_request(self, client: AsyncClient, fake_aggregator):
        await client.get("/api/stats")
        await client.get("/api/stats")
        assert fake_aggregator.calls == 2

    @pytest.mark.asyncio
    async def test_concurrent_requests(self, client: AsyncClient, fake_aggregator):
        responses = await asyncio.gather(*(client.get("/api/stats") for _ in range(50)))
        assert all(r.status_code == 200 for r in responses)
        assert fake_aggregator.calls == 50


class TestDashboard:
    @pytest.mark.asyncio
    async def test_index_served(self, client: AsyncClient):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "/api/stats" in resp.text

    @pytest.mark.asyncio
    async def test_missing_dashboard(self, client: AsyncClient, tmp_path):
        with patch("hoststats.api.routes.settings") as mock_settings:
            mock_settings.static_dir = str(tmp_path)
            resp = await client.get("/")
        assert resp.status_code == 404


# ── lifespan ───────────────────────────────────────────


class TestLifespan:
    @pytest.mark.asyncio
    async def test_lifespan_wires_shared_handle(self):
        from hoststats.engine import SnapshotAggregator, SystemHandle

        with patch("hoststats.engine.system_handle.psutil"):
            async with app.router.lifespan_context(app):
                assert isinstance(app.state.system_handle, SystemHandle)
                assert isinstance(app.state.aggregator, SnapshotAggregator)
                assert app.state.aggregator.handle is app.state.system_handle
        del app.state.system_handle
        del app.state.aggregator


# ── real aggregator, every source down ─────────────────


class BrokenProbe(BaseProbe):
    """Probe whose data source always fails."""

    def __init__(self, name: str, default) -> None:
        self.name = name
        self.default = default

    async def probe(self):
        raise OSError(f"{self.name} source gone")


class TestDegradedHost:
    @pytest.mark.asyncio
    async def test_all_sources_down_still_returns_full_body(self):
        from hoststats.engine import SnapshotAggregator, SystemHandle

        with patch("hoststats.engine.system_handle.psutil") as mock_psutil:
            mock_psutil.cpu_percent.side_effect = RuntimeError("no cpu")
            mock_psutil.virtual_memory.side_effect = RuntimeError("no meminfo")
            aggregator = SnapshotAggregator(SystemHandle())
            # cpu and memory stay real and read the never-refreshed handle
            for name, probe in list(aggregator.probes.items()):
                if name not in ("cpu", "memory"):
                    aggregator.probes[name] = BrokenProbe(name, probe.default)

            app.state.aggregator = aggregator
            try:
                transport = ASGITransport(app=app, raise_app_exceptions=False)
                async with AsyncClient(transport=transport, base_url="http://test") as c:
                    resp = await c.get("/api/stats")
            finally:
                del app.state.aggregator

        assert resp.status_code == 200
        assert resp.json() == {
            "host": "Unknown",
            "os": "Unknown Unknown",
            "total_memory": 0,
            "used_memory": 0,
            "mempercentage": 0.0,
            "cpu_usage": 0.0,
            "temp": 0.0,
            "received": 0,
            "transmitted": 0,
            "total_disk": 0,
            "used_disk": 0,
            "free_disk": 0,
            "uptime_hours": 0,
            "docker_containers": 0,
            "last_update": "Unknown",
        }
