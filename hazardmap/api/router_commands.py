"""
Command endpoints: apply-filters, reset-filters, export, locate.

Handlers are ``async def`` so they all run on the event loop, one at a time.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from hazardmap.controller import HazardMapController
from hazardmap.errors import GeolocationUnavailable
from hazardmap.api.dependencies import get_controller, parse_criteria
from hazardmap.api.response_models import (
    ApplyFiltersRequest, LocateCommand, LocateResponse, ViewResponse,
)

router = APIRouter(prefix="/api/commands", tags=["commands"])


@router.post("/apply-filters", response_model=ViewResponse)
async def apply_filters(
    req: ApplyFiltersRequest,
    controller: HazardMapController = Depends(get_controller),
):
    """Recompute the filtered subset and rebuild markers + stats."""
    criteria = parse_criteria(req)
    return ViewResponse(**controller.apply_filters(criteria))


@router.post("/reset-filters", response_model=ViewResponse)
async def reset_filters(controller: HazardMapController = Depends(get_controller)):
    """All categories, severity 1, empty search, then re-apply."""
    return ViewResponse(**controller.reset_filters())


@router.post("/export")
async def export_geojson(controller: HazardMapController = Depends(get_controller)):
    """Download the current filtered subset as GeoJSON."""
    export = controller.export()
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{export.filename}"',
            "X-Feature-Count": str(export.feature_count),
        },
    )


@router.post("/locate", response_model=LocateResponse)
async def locate(
    req: LocateCommand,
    controller: HazardMapController = Depends(get_controller),
):
    try:
        target = controller.locate(req.geolocation_available)
    except GeolocationUnavailable as exc:
        return LocateResponse(ok=False, message=str(exc))
    return LocateResponse(ok=True, set_view=target.set_view, max_zoom=target.max_zoom)
