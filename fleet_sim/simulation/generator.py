"""
Fleet generator.

Builds a fresh fleet of cameras. Structure is deterministic (ids, names,
host octets); only the site and firmware choices are random.
"""
from __future__ import annotations

import logging
import random
from typing import Sequence

from fleet_sim.core.enums import CameraStatus
from fleet_sim.schemas.camera import Camera
from fleet_sim.simulation._probabilities import HOST_OCTET_MIN, HOST_OCTET_SPAN
from fleet_sim.simulation.sites import SiteRegistry

logger = logging.getLogger(__name__)


def camera_name(site: str, camera_id: int) -> str:
    """``T4-CAM-007`` style name."""
    return f"{site}-CAM-{camera_id:03d}"


def host_octet(camera_id: int) -> int:
    """Map an id onto 1..254 so the initial IP is valid for any fleet size."""
    return camera_id % HOST_OCTET_SPAN + HOST_OCTET_MIN


def generate_fleet(
    count: int,
    registry: SiteRegistry,
    approved_firmware: Sequence[str],
    rng: random.Random,
) -> list[Camera]:
    """
    Generate ``count`` cameras with ids ``0..count-1``.

    Every camera starts online, on its site's VLAN and subnet, running an
    approved firmware. Policy violations only appear after ticks.

    Args:
        count: Number of cameras (>= 0)
        registry: Site policies to draw from
        approved_firmware: Firmware pool (non-empty)
        rng: Random source

    Returns:
        list[Camera]: The new fleet, ordered by id
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if not approved_firmware:
        raise ValueError("approved_firmware must not be empty")

    sites = registry.site_names
    fleet: list[Camera] = []
    for camera_id in range(count):
        site = rng.choice(sites)
        policy = registry.policy_of(site)
        fleet.append(Camera(
            id=camera_id,
            name=camera_name(site, camera_id),
            site=site,
            status=CameraStatus.ONLINE,
            ip=f"{policy.subnet_prefix}{host_octet(camera_id)}",
            vlan=policy.vlan,
            firmware_version=rng.choice(approved_firmware),
        ))

    logger.debug("Generated %d cameras across %d sites", count, len(sites))
    return fleet
