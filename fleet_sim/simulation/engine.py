"""
Simulation engine.

One tick re-rolls the four mutable fields of every camera, independently
per field and per camera:

    status    offline  with OFFLINE_PROB,     else online
    ip        169.254.x.y with DHCP_FAIL_PROB, else site prefix + random host
    vlan      any known VLAN with WRONG_VLAN_PROB, else the site VLAN
    firmware  OUTDATED_FIRMWARE with OUTDATED_FW_PROB, else an approved build

The wrong-VLAN draw includes the correct VLAN, so some faulted draws are
indistinguishable from no fault.
"""
from __future__ import annotations

import random
from typing import MutableSequence, Sequence

from fleet_sim.core.enums import CameraStatus
from fleet_sim.schemas.camera import Camera
from fleet_sim.simulation._probabilities import (
    DHCP_FAIL_PROB,
    HOST_OCTET_MAX,
    HOST_OCTET_MIN,
    LINK_LOCAL_FOURTH_OCTET,
    LINK_LOCAL_PREFIX,
    LINK_LOCAL_THIRD_OCTET,
    OFFLINE_PROB,
    OUTDATED_FIRMWARE,
    OUTDATED_FW_PROB,
    WRONG_VLAN_PROB,
)
from fleet_sim.simulation.sites import SiteRegistry


def link_local_ip(rng: random.Random) -> str:
    """Random APIPA address, as seen when DHCP assignment fails."""
    return (
        f"{LINK_LOCAL_PREFIX}"
        f"{rng.randint(*LINK_LOCAL_THIRD_OCTET)}."
        f"{rng.randint(*LINK_LOCAL_FOURTH_OCTET)}"
    )


def tick(
    fleet: MutableSequence[Camera],
    registry: SiteRegistry,
    approved_firmware: Sequence[str],
    rng: random.Random,
) -> None:
    """
    Advance every camera in ``fleet`` by one step, in place.

    Raises:
        UnknownSiteError: a camera's site is not registered
    """
    known_vlans = registry.vlans

    for cam in fleet:
        policy = registry.policy_of(cam.site)

        cam.status = (
            CameraStatus.OFFLINE if rng.random() < OFFLINE_PROB
            else CameraStatus.ONLINE
        )

        if rng.random() < DHCP_FAIL_PROB:
            cam.ip = link_local_ip(rng)
        else:
            cam.ip = f"{policy.subnet_prefix}{rng.randint(HOST_OCTET_MIN, HOST_OCTET_MAX)}"

        if rng.random() < WRONG_VLAN_PROB:
            cam.vlan = rng.choice(known_vlans)
        else:
            cam.vlan = policy.vlan

        cam.firmware_version = (
            OUTDATED_FIRMWARE if rng.random() < OUTDATED_FW_PROB
            else rng.choice(approved_firmware)
        )
