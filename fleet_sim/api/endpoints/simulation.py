"""
Simulation control endpoints.

On-demand tick / reset, plus a status view of the background scheduler.
Write handlers are plain ``def`` so FastAPI runs them in the threadpool;
they may wait on the store's writer lock while a scheduled tick runs.
"""
from __future__ import annotations

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fleet_sim.api.deps import get_app_settings, get_fleet_store, get_scheduler
from fleet_sim.core.config import Settings
from fleet_sim.schemas.camera import OkResponse, SimulationStatus
from fleet_sim.services.fleet_store import FleetStore
from fleet_sim.services.scheduler import SimulationScheduler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sim")


@router.post("/tick", response_model=OkResponse)
def force_tick(
    store: Annotated[FleetStore, Depends(get_fleet_store)],
) -> OkResponse:
    """Apply one simulation tick immediately."""
    store.apply_tick()
    logger.info("Manual tick applied (tick #%d)", store.tick_count)
    return OkResponse()


@router.post("/reset", response_model=OkResponse)
def reset_fleet(
    store: Annotated[FleetStore, Depends(get_fleet_store)],
    app_settings: Annotated[Settings, Depends(get_app_settings)],
    count: Optional[int] = Query(
        None, ge=0, description="New fleet size (default: FLEET_SIZE)",
    ),
) -> OkResponse:
    """
    Regenerate the fleet from scratch.

    Args:
        count: New fleet size; falls back to the configured fleet size

    Returns:
        OkResponse: ``{"ok": true}``
    """
    if count is None:
        count = app_settings.fleet_size
    elif count > app_settings.max_fleet_size:
        raise HTTPException(
            status_code=422,
            detail=f"count must be <= {app_settings.max_fleet_size}",
        )
    store.reset(count)
    return OkResponse()


@router.get("/status", response_model=SimulationStatus)
async def get_status(
    store: Annotated[FleetStore, Depends(get_fleet_store)],
    app_settings: Annotated[Settings, Depends(get_app_settings)],
    scheduler: Annotated[Optional[SimulationScheduler], Depends(get_scheduler)],
) -> SimulationStatus:
    """Fleet size, ticks since reset and scheduler state."""
    return SimulationStatus(
        fleet_size=store.size,
        ticks=store.tick_count,
        tick_interval_seconds=app_settings.tick_interval_seconds,
        scheduler_running=scheduler is not None and scheduler.is_running(),
    )
