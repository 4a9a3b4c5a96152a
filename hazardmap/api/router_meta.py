"""
Meta endpoints: health, map config, current view.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from hazardmap.config import (
    DEFAULT_CENTER, DEFAULT_ZOOM, TILE_URL, TILE_ATTRIBUTION, CLUSTER_OPTIONS,
    LOCATE_MAX_ZOOM, SEVERITY_MIN, SEVERITY_MAX, EXPORT_FILENAME,
)
from hazardmap.controller import HazardMapController
from hazardmap.api.dependencies import get_controller
from hazardmap.api.response_models import HealthResponse, MapConfigResponse, CategoryInfo, ViewResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health(controller: HazardMapController = Depends(get_controller)):
    store = controller.store
    return HealthResponse(
        status="ok" if store.load_error is None else "load_failed",
        points=store.point_count(),
        filtered=store.filtered_count(),
        rejected_rows=store.rejected_count(),
        load_error=store.load_error,
        loaded_at=store.loaded_at.isoformat() if store.loaded_at else None,
    )


@router.get("/config", response_model=MapConfigResponse)
async def map_config(controller: HazardMapController = Depends(get_controller)):
    return MapConfigResponse(
        center=list(DEFAULT_CENTER),
        zoom=DEFAULT_ZOOM,
        tile_url=TILE_URL,
        tile_attribution=TILE_ATTRIBUTION,
        cluster_options=CLUSTER_OPTIONS,
        locate_max_zoom=LOCATE_MAX_ZOOM,
        severity_min=SEVERITY_MIN,
        severity_max=SEVERITY_MAX,
        categories=[CategoryInfo(**c) for c in controller.store.categories()],
        export_filename=EXPORT_FILENAME,
    )


@router.get("/view", response_model=ViewResponse)
async def current_view(controller: HazardMapController = Depends(get_controller)):
    """Markers and stats for the criteria currently in effect."""
    return ViewResponse(**controller.state())
