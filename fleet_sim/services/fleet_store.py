"""
Fleet Store.

Sole owner of camera state. Readers get the currently published snapshot
(an immutable tuple of frozen cameras) without locking. Writers (tick, reset) hold one lock,
build the next fleet off to the side and publish it with a single
assignment, so a reader never observes a half-applied tick and scheduled
ticks never overlap with on-demand ones.
"""
from __future__ import annotations

import logging
import random
import threading
import time as _time
from typing import Optional, Sequence

from fleet_sim.schemas.camera import Camera, FrozenCamera, Summary
from fleet_sim.simulation.engine import tick
from fleet_sim.simulation.generator import generate_fleet
from fleet_sim.simulation.metrics import summarize
from fleet_sim.simulation.sites import SiteRegistry

logger = logging.getLogger(__name__)


def _publish(fleet: Sequence[Camera]) -> tuple[FrozenCamera, ...]:
    return tuple(FrozenCamera.model_validate(cam.model_dump()) for cam in fleet)


class FleetStore:
    """
    Process-lifetime holder of the camera fleet.

    Created once per application instance and passed to whoever needs it
    (endpoints via ``app.state``, the scheduler via its job arguments).
    """

    def __init__(
        self,
        registry: SiteRegistry,
        approved_firmware: Sequence[str],
        rng: Optional[random.Random] = None,
        initial_size: int = 0,
    ) -> None:
        """
        Initialize the store and generate the initial fleet.

        Args:
            registry: Site policies
            approved_firmware: Firmware pool for generation and ticks
            rng: Random source (seed it for reproducible runs)
            initial_size: Number of cameras generated up front
        """
        if not approved_firmware:
            raise ValueError("approved_firmware must not be empty")
        self.registry = registry
        self.approved_firmware = tuple(approved_firmware)
        self._rng = rng if rng is not None else random.Random()
        self._write_lock = threading.Lock()
        self._cameras: tuple[FrozenCamera, ...] = ()
        self._tick_count = 0
        self.reset(initial_size)

    # ── Reads ────────────────────────────────────────────────────

    def current_snapshot(self) -> tuple[FrozenCamera, ...]:
        """Return the published fleet. Neither the tuple nor its cameras accept writes."""
        return self._cameras

    def get_camera(self, camera_id: int) -> FrozenCamera | None:
        """Look up one camera in the current snapshot."""
        snapshot = self._cameras
        # ids are positional from generation
        if 0 <= camera_id < len(snapshot) and snapshot[camera_id].id == camera_id:
            return snapshot[camera_id]
        return next((c for c in snapshot if c.id == camera_id), None)

    def summary(self) -> Summary:
        """Health counters for the current snapshot."""
        return summarize(self._cameras, self.registry)

    @property
    def size(self) -> int:
        return len(self._cameras)

    @property
    def tick_count(self) -> int:
        """Ticks applied since the last reset."""
        return self._tick_count

    # ── Writes ───────────────────────────────────────────────────

    def apply_tick(self) -> None:
        """
        Advance the whole fleet by one tick and publish the result.

        If the engine raises, the published snapshot is left untouched.
        """
        with self._write_lock:
            t0 = _time.monotonic()
            next_fleet = [Camera.model_validate(cam.model_dump()) for cam in self._cameras]
            tick(next_fleet, self.registry, self.approved_firmware, self._rng)
            self._cameras = _publish(next_fleet)
            self._tick_count += 1
            logger.debug(
                "Tick #%d applied to %d cameras in %.4fs",
                self._tick_count, len(next_fleet), _time.monotonic() - t0,
            )

    def reset(self, count: int) -> None:
        """Replace the fleet wholesale with ``count`` freshly generated cameras."""
        with self._write_lock:
            fleet = generate_fleet(
                count, self.registry, self.approved_firmware, self._rng,
            )
            self._cameras = _publish(fleet)
            self._tick_count = 0
        logger.info("Fleet reset: %d cameras", count)
