"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from hazardmap.config import SEVERITY_MIN, SEVERITY_MAX


class HealthResponse(BaseModel):
    status: str
    points: int
    filtered: int
    rejected_rows: int
    load_error: Optional[str] = None
    loaded_at: Optional[str] = None


class CategoryInfo(BaseModel):
    code: str
    label: str
    cls: str


class MapConfigResponse(BaseModel):
    center: list[float]
    zoom: int
    tile_url: str
    tile_attribution: str
    cluster_options: dict[str, Any]
    locate_max_zoom: int
    severity_min: int
    severity_max: int
    categories: list[CategoryInfo]
    export_filename: str


class ApplyFiltersRequest(BaseModel):
    categories: list[str]
    min_severity: int = Field(SEVERITY_MIN, ge=SEVERITY_MIN, le=SEVERITY_MAX)
    search: str = ""


class LocateCommand(BaseModel):
    geolocation_available: bool


class LocateResponse(BaseModel):
    ok: bool
    set_view: bool = False
    max_zoom: Optional[int] = None
    message: Optional[str] = None


class ViewResponse(BaseModel):
    """Snapshot of criteria, markers and stats after a command."""
    criteria: dict[str, Any]
    total: int
    count: int
    revision: int
    markers: list[dict[str, Any]]
    stats: list[dict[str, Any]]
