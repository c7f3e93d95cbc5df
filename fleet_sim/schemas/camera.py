"""
Pydantic schemas for Camera and fleet summary API models.

Wire names are camelCase (``firmwareVersion``, ``dhcpFail``...) to match the
dashboard; Python attributes stay snake_case.
"""
from pydantic import BaseModel, ConfigDict, Field

from fleet_sim.core.enums import CameraStatus


class Camera(BaseModel):
    """A simulated camera. ``id``, ``name`` and ``site`` never change after generation."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=0, description="Sequential camera ID")
    name: str = Field(..., description="Camera name", examples=["T4-CAM-007"])
    site: str = Field(..., description="Site name", examples=["T4"])
    status: CameraStatus = Field(CameraStatus.ONLINE, description="Reachability")
    ip: str = Field(..., description="IPv4 address", examples=["10.51.100.8"])
    vlan: int = Field(..., description="Access VLAN")
    firmware_version: str = Field(
        ...,
        alias="firmwareVersion",
        description="Running firmware",
        examples=["10.12.221"],
    )


class FrozenCamera(Camera):
    """A camera as published in a fleet snapshot. Assignment is rejected."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Summary(BaseModel):
    """Fleet-wide health counters."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    offline: int = 0
    online: int = 0
    dhcp_fail: int = Field(0, alias="dhcpFail")
    wrong_vlan: int = Field(0, alias="wrongVlan")
    old_fw: int = Field(0, alias="oldFw")


class SimulationStatus(BaseModel):
    """Runtime state of the simulation."""

    model_config = ConfigDict(populate_by_name=True)

    fleet_size: int = Field(..., alias="fleetSize")
    ticks: int = Field(..., description="Ticks applied since the last reset")
    tick_interval_seconds: float = Field(..., alias="tickIntervalSeconds")
    scheduler_running: bool = Field(..., alias="schedulerRunning")


class OkResponse(BaseModel):
    """Generic acknowledgement."""

    ok: bool = True
