"""
Dashboard API endpoints.

提供 Dashboard 上方的快速概覽。
"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from fleet_sim.api.deps import get_fleet_store
from fleet_sim.schemas.camera import Summary
from fleet_sim.services.fleet_store import FleetStore

router = APIRouter()


@router.get("/summary", response_model=Summary)
async def get_summary(
    store: Annotated[FleetStore, Depends(get_fleet_store)],
) -> Summary:
    """
    Fleet health counters.

    Returns:
        Summary: total / offline / online / dhcpFail / wrongVlan / oldFw
    """
    return store.summary()
