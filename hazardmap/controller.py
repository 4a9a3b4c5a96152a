"""
HazardMapController — owns the store, the filter criteria and the view.

Each user action maps to one command method. The HTTP routes and the CLI are
thin adapters over these; nothing else mutates store or view state.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hazardmap.config import DATA_SOURCE, LOCATE_MAX_ZOOM
from hazardmap.data.schemas import FilterCriteria
from hazardmap.data.store import PointStore
from hazardmap.errors import GeolocationUnavailable
from hazardmap.export.geojson import GeoJSONExport, build_export
from hazardmap.view.sync import ViewSynchronizer


@dataclass(frozen=True)
class LocateRequest:
    """What the adapter should ask the map to do for 'locate me'."""
    set_view: bool
    max_zoom: int


class HazardMapController:
    def __init__(
        self,
        store: Optional[PointStore] = None,
        view: Optional[ViewSynchronizer] = None,
    ) -> None:
        self.store = store if store is not None else PointStore()
        self.view = view if view is not None else ViewSynchronizer()
        self.criteria = FilterCriteria()

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    def load(self, source: str | Path = DATA_SOURCE) -> "HazardMapController":
        """Populate the store once and render the initial (unfiltered) view."""
        self.store.load(source)
        self._refresh()
        return self

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def apply_filters(self, criteria: FilterCriteria) -> dict:
        self.criteria = criteria
        self._refresh()
        return self.state()

    def reset_filters(self) -> dict:
        return self.apply_filters(FilterCriteria())

    def export(self) -> GeoJSONExport:
        """GeoJSON of whatever is currently filtered."""
        return build_export(self.store.filtered)

    def locate(self, geolocation_available: bool) -> LocateRequest:
        if not geolocation_available:
            raise GeolocationUnavailable()
        return LocateRequest(set_view=True, max_zoom=LOCATE_MAX_ZOOM)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _refresh(self) -> None:
        subset = self.store.refilter(self.criteria)
        self.view.render(subset)

    def state(self) -> dict:
        """Snapshot of criteria, markers and stats for the adapter."""
        snap = self.view.snapshot()
        return {
            "criteria": self.criteria.to_dict(),
            "total": self.store.point_count(),
            "count": self.store.filtered_count(),
            **snap,
        }
