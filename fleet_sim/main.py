"""
Camera Fleet Simulator - FastAPI Application Entry Point.

啟動:
    uvicorn fleet_sim.main:app --host 0.0.0.0 --port 3000
    python -m fleet_sim.main
"""
from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator, Optional

import yaml
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fleet_sim import __version__
from fleet_sim.core.config import Settings, SitePolicyConfig, settings
from fleet_sim.core.exceptions import UnknownSiteError
from fleet_sim.services.fleet_store import FleetStore
from fleet_sim.services.scheduler import SimulationScheduler
from fleet_sim.simulation.sites import SiteRegistry

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.app_debug else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_fleet_config(path: str | Path) -> dict[str, Any]:
    """
    Load site policies and approved firmware from a YAML file.

    Expected layout::

        sites:
          T4: {vlan: 100, subnet_prefix: "10.51.100."}
        approved_firmware: ["10.12.221", "9.80.5"]

    Returns:
        dict of Settings overrides (``sites`` / ``approved_firmware``);
        empty if the file is missing or empty.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.info("%s not found, using built-in fleet config", config_path)
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if not config:
        return {}

    overrides: dict[str, Any] = {}

    sites = config.get("sites") or {}
    if sites:
        overrides["sites"] = {
            str(name): SitePolicyConfig(**(sc or {}))
            for name, sc in sites.items()
        }

    firmware = config.get("approved_firmware") or []
    if firmware:
        overrides["approved_firmware"] = [str(v) for v in firmware]

    logger.info(
        "Loaded fleet config from %s: %s", config_path, sorted(overrides),
    )
    return overrides


def resolve_settings(app_settings: Settings) -> Settings:
    """Apply YAML overrides for fields not explicitly set via env."""
    overrides = load_fleet_config(app_settings.fleet_config_path)
    overrides = {
        k: v for k, v in overrides.items()
        if k not in app_settings.model_fields_set
    }
    if not overrides:
        return app_settings
    return app_settings.model_copy(update=overrides)


def build_fleet_store(app_settings: Settings) -> FleetStore:
    """Create the site registry, RNG and initial fleet."""
    registry = SiteRegistry.from_config(app_settings.sites)
    rng = (
        random.Random(app_settings.random_seed)
        if app_settings.random_seed is not None
        else random.Random()
    )
    return FleetStore(
        registry,
        app_settings.approved_firmware,
        rng=rng,
        initial_size=app_settings.fleet_size,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan management.

    Startup: Build the fleet, start the tick scheduler.
    Shutdown: Stop the scheduler.
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info("Starting application...")
    store = build_fleet_store(app_settings)
    app.state.fleet_store = store

    scheduler: Optional[SimulationScheduler] = None
    if app_settings.scheduler_enabled:
        scheduler = SimulationScheduler()
        scheduler.add_tick_job(store, app_settings.tick_interval_seconds)
        scheduler.start()
    else:
        logger.info("Background tick disabled (SCHEDULER_ENABLED=false)")
    app.state.scheduler = scheduler

    base = f"http://localhost:{app_settings.port}{app_settings.api_prefix}"
    logger.info("API running at http://localhost:%d", app_settings.port)
    logger.info("Try: %s/cameras", base)
    logger.info("Try: %s/summary", base)

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if scheduler is not None:
        scheduler.stop()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = resolve_settings(app_settings or settings)

    app = FastAPI(
        title=app_settings.app_name,
        description="Simulated camera fleet with fault injection",
        version=__version__,
        docs_url=f"{app_settings.api_prefix}/docs",
        redoc_url=f"{app_settings.api_prefix}/redoc",
        openapi_url=f"{app_settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UnknownSiteError)
    async def unknown_site_handler(request: Request, exc: UnknownSiteError) -> JSONResponse:
        """
        Fleet invariant violation: a camera references an unregistered site.

        Never produced by well-formed generation; surfaced as a 500.
        """
        logger.error(
            "Fleet invariant violated on %s %s: %s",
            request.method, request.url.path, exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": f"Fleet invariant violated: {exc}"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled 500 errors."""
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method, request.url.path, exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # API endpoints
    from fleet_sim.api.endpoints import cameras, dashboard, health, simulation

    prefix = app_settings.api_prefix
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(cameras.router, prefix=prefix, tags=["Cameras"])
    app.include_router(dashboard.router, prefix=prefix, tags=["Dashboard"])
    app.include_router(simulation.router, prefix=prefix, tags=["Simulation"])

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "fleet_sim.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_debug,
    )


if __name__ == "__main__":
    run()
