"""
Scheduler Service.

Drives the background simulation tick using APScheduler.
The job only calls ``FleetStore.apply_tick()``; serialization against
on-demand ticks is the store's responsibility.
"""
from __future__ import annotations

import logging
import time as _time
from typing import Any

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from fleet_sim.core.exceptions import UnknownSiteError
from fleet_sim.services.fleet_store import FleetStore

logger = logging.getLogger(__name__)

TICK_JOB_ID = "simulation_tick"


class SimulationScheduler:
    """
    Scheduler for the recurring simulation tick.

    ``max_instances=1`` + ``coalesce`` keep a slow tick from stacking up
    behind itself.
    """

    def __init__(self) -> None:
        """Initialize scheduler."""
        self.scheduler = AsyncIOScheduler(
            job_defaults={
                "max_instances": 1,
                "coalesce": True,
                "misfire_grace_time": 30,
            },
        )
        self._job_id: str | None = None
        self._started = False

    def add_tick_job(self, store: FleetStore, interval_seconds: float) -> str:
        """
        Add (or replace) the recurring tick job.

        Args:
            store: Fleet store to advance
            interval_seconds: Tick interval in seconds (> 0)

        Returns:
            str: Job ID
        """
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")

        job = self.scheduler.add_job(
            self._run_tick,
            trigger=IntervalTrigger(seconds=interval_seconds),
            id=TICK_JOB_ID,
            kwargs={"store": store},
            replace_existing=True,
        )
        self._job_id = job.id
        logger.info("Added simulation tick job every %.1fs", interval_seconds)
        return job.id

    def remove_tick_job(self) -> bool:
        """Remove the tick job if scheduled."""
        if self._job_id is None:
            return False
        self.scheduler.remove_job(self._job_id)
        logger.info("Removed simulation tick job")
        self._job_id = None
        return True

    def get_jobs(self) -> list[dict[str, Any]]:
        """Get list of all scheduled jobs."""
        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": str(getattr(job, "next_run_time", None)),
                "trigger": str(job.trigger),
            }
            for job in self.scheduler.get_jobs()
        ]

    # ── Internal ─────────────────────────────────────────────────

    @staticmethod
    def _run_tick(store: FleetStore) -> None:
        """Apply one tick to ``store``."""
        t0 = _time.monotonic()
        try:
            store.apply_tick()
        except UnknownSiteError as e:
            logger.critical("Fleet invariant violated during scheduled tick: %s", e)
            raise
        except Exception as e:
            logger.error("Scheduled tick failed: %s", e)
            raise
        finally:
            logger.debug(
                "Scheduled tick done: %d cameras, %.4fs",
                store.size, _time.monotonic() - t0,
            )

    # ── Lifecycle ────────────────────────────────────────────────

    def start(self) -> None:
        """Start the scheduler."""
        if not self._started:
            self.scheduler.start()
            self._started = True
            logger.info("Scheduler started")

    def stop(self) -> None:
        """
        Stop the scheduler.

        ``AsyncIOScheduler`` may complete the shutdown on the next event-loop
        turn; ``is_running`` reports False as soon as this returns.
        Calling it again is a no-op.
        """
        if self._started:
            self._started = False
            self.scheduler.shutdown(wait=True)
            logger.info("Scheduler stopped")

    def is_running(self) -> bool:
        """Check if scheduler is running."""
        return self._started
