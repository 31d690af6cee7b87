from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from hoststats.api.routes import router
from hoststats.config import settings
from hoststats.engine import SnapshotAggregator, SystemHandle

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── startup ───────────────────────────────────────
    handle = SystemHandle()
    app.state.system_handle = handle
    app.state.aggregator = SnapshotAggregator(handle, settings=settings)

    logger.info("%s started with %d probes", settings.app_name, len(app.state.aggregator.probes))

    yield

    # ── shutdown ──────────────────────────────────────
    logger.info("%s shut down", settings.app_name)


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(router)


def run() -> None:
    """Console entry point: serve the app on the configured address."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="debug" if settings.debug else "info")


if __name__ == "__main__":
    run()
