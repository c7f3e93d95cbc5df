"""
Camera API endpoints.

Read-only views of the current fleet snapshot.
"""
from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fleet_sim.api.deps import get_fleet_store
from fleet_sim.schemas.camera import Camera
from fleet_sim.services.fleet_store import FleetStore

router = APIRouter()


@router.get("/cameras", response_model=list[Camera])
async def list_cameras(
    store: Annotated[FleetStore, Depends(get_fleet_store)],
    site: Optional[str] = Query(None, description="Only cameras of this site"),
    limit: Optional[int] = Query(None, ge=0, description="Return at most N cameras"),
) -> list[Camera]:
    """
    List cameras of the current snapshot, ordered by id.

    Args:
        site: Site filter (404 if the site is not registered)
        limit: Maximum number of cameras to return

    Returns:
        list[Camera]: Snapshot records
    """
    cameras = store.current_snapshot()
    if site is not None:
        if site not in store.registry:
            raise HTTPException(status_code=404, detail=f"Unknown site: {site}")
        cameras = tuple(c for c in cameras if c.site == site)
    if limit is not None:
        cameras = cameras[:limit]
    return list(cameras)


@router.get("/cameras/{camera_id}", response_model=Camera)
async def get_camera(
    camera_id: int,
    store: Annotated[FleetStore, Depends(get_fleet_store)],
) -> Camera:
    """Get a single camera by id."""
    camera = store.get_camera(camera_id)
    if camera is None:
        raise HTTPException(status_code=404, detail=f"Camera {camera_id} not found")
    return camera
