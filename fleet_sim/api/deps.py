"""
Shared FastAPI dependencies.

The store, scheduler and settings live on ``app.state`` (set by the
lifespan), so each app instance owns its own fleet.
"""
from __future__ import annotations

from fastapi import Request

from fleet_sim.core.config import Settings
from fleet_sim.services.fleet_store import FleetStore
from fleet_sim.services.scheduler import SimulationScheduler


def get_fleet_store(request: Request) -> FleetStore:
    """Fleet store of the running app."""
    return request.app.state.fleet_store


def get_scheduler(request: Request) -> SimulationScheduler | None:
    """Tick scheduler of the running app (None when disabled)."""
    return getattr(request.app.state, "scheduler", None)


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with."""
    return request.app.state.settings
