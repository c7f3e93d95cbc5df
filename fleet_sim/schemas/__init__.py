"""Pydantic schemas for the HTTP API."""
from .camera import Camera, FrozenCamera, OkResponse, SimulationStatus, Summary

__all__ = [
    "Camera",
    "FrozenCamera",
    "OkResponse",
    "SimulationStatus",
    "Summary",
]
