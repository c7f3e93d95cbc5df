"""
Enumeration definitions for the application.

All enums are defined here to maintain consistency and type safety.
"""
from enum import Enum


class CameraStatus(str, Enum):
    """Reachability of a simulated camera."""

    ONLINE = "online"
    OFFLINE = "offline"
