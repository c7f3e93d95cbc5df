"""Core module - contains enums, exceptions and configuration."""
from .enums import CameraStatus
from .exceptions import FleetSimError, UnknownSiteError

__all__ = [
    "CameraStatus",
    "FleetSimError",
    "UnknownSiteError",
]
