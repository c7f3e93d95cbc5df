"""Fleet health counters computed from a snapshot."""
from __future__ import annotations

from typing import Iterable

from fleet_sim.core.enums import CameraStatus
from fleet_sim.schemas.camera import Camera, Summary
from fleet_sim.simulation._probabilities import LINK_LOCAL_PREFIX, OUTDATED_FIRMWARE
from fleet_sim.simulation.sites import SiteRegistry


def summarize(fleet: Iterable[Camera], registry: SiteRegistry) -> Summary:
    """
    Count offline / DHCP-failed / wrong-VLAN / outdated-firmware cameras.

    ``online`` is derived as ``total - offline``. An empty fleet yields all
    zeros.

    Raises:
        UnknownSiteError: a camera's site is not registered
    """
    total = offline = dhcp_fail = wrong_vlan = old_fw = 0

    for cam in fleet:
        total += 1
        if cam.status == CameraStatus.OFFLINE:
            offline += 1
        if cam.ip.startswith(LINK_LOCAL_PREFIX):
            dhcp_fail += 1
        if cam.vlan != registry.policy_of(cam.site).vlan:
            wrong_vlan += 1
        if cam.firmware_version == OUTDATED_FIRMWARE:
            old_fw += 1

    return Summary(
        total=total,
        offline=offline,
        online=total - offline,
        dhcp_fail=dhcp_fail,
        wrong_vlan=wrong_vlan,
        old_fw=old_fw,
    )
