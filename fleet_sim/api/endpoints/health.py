"""Liveness endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from fleet_sim.schemas.camera import OkResponse

router = APIRouter()


@router.get("/health", response_model=OkResponse)
async def health_check() -> OkResponse:
    """Health check endpoint."""
    return OkResponse()
