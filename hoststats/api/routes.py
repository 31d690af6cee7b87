from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from hoststats.config import settings
from hoststats.models import Snapshot

logger = logging.getLogger(__name__)

router = APIRouter()


# ── REST routes ───────────────────────────────────────


@router.get("/api/stats")
async def get_stats(request: Request) -> Snapshot:
    aggregator = request.app.state.aggregator
    return await aggregator.build_snapshot()


# ── dashboard ─────────────────────────────────────────


@router.get("/", response_class=HTMLResponse)
async def dashboard() -> HTMLResponse:
    index = Path(settings.static_dir) / "index.html"
    try:
        return HTMLResponse(index.read_text(encoding="utf-8"))
    except OSError:
        logger.warning("Dashboard page missing: %s", index)
        raise HTTPException(status_code=404, detail="Dashboard not found")
